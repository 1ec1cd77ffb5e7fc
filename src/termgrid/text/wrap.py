"""Word wrapping that keeps colour and hyperlink state intact across line breaks."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .ansi import (
    ANSI_RESET,
    HYPERLINK_PREFIX,
    HYPERLINK_TERMINATOR,
    hyperlink_target,
    is_reset,
    scan_segments,
)

_HYPERLINK_CLOSE = HYPERLINK_PREFIX + HYPERLINK_TERMINATOR


@dataclass(frozen=True)
class ActiveStyleState:
    """
    Escape sequences currently open on a line.

    Re-emitting :attr:`prefix` at the start of a continuation line reproduces
    the style in effect at the break, so each wrapped line renders on its own.
    Instances are immutable; :meth:`apply` returns the successor state.
    """

    codes: Tuple[str, ...] = ()

    def apply(self, code: str) -> ActiveStyleState:
        """
        Return the state that results from emitting ``code``.

        A reset clears every open code. A hyperlink close (empty target) drops
        the open hyperlinks and keeps colours. Anything else is appended.
        """
        if is_reset(code):
            return ActiveStyleState()
        if hyperlink_target(code) == "":
            return ActiveStyleState(tuple(c for c in self.codes if not hyperlink_target(c)))
        return ActiveStyleState(self.codes + (code,))

    @property
    def prefix(self) -> str:
        return "".join(self.codes)

    @property
    def in_hyperlink(self) -> bool:
        return any(hyperlink_target(code) for code in self.codes)

    def __bool__(self) -> bool:
        return bool(self.codes)


@dataclass
class _LineAccumulator:
    max_width: int
    lines: List[str] = field(default_factory=list)
    parts: List[str] = field(default_factory=list)
    width: int = 0

    @property
    def remaining(self) -> int:
        return self.max_width - self.width

    def append(self, text: str, visible: int) -> None:
        self.parts.append(text)
        self.width += visible

    def break_line(self, style: ActiveStyleState) -> None:
        # A reset does not end an OSC 8 link; close it so the border stays outside.
        if style.in_hyperlink:
            self.parts.append(_HYPERLINK_CLOSE)
        if style:
            self.parts.append(ANSI_RESET)
        self.lines.append("".join(self.parts))
        self.parts = [style.prefix] if style else []
        self.width = 0

    def hard_break(self, chars: str, style: ActiveStyleState) -> None:
        for char in chars:
            if self.width >= self.max_width:
                self.break_line(style)
            self.append(char, 1)

    def append_trailing(self, whitespace: str) -> None:
        # Whitespace that would cross the right edge sits on a break point and is dropped.
        kept = whitespace[: max(0, self.remaining)]
        if kept:
            self.append(kept, len(kept))

    def finish(self) -> List[str]:
        current = "".join(self.parts)
        if current:
            self.lines.append(current)
        return self.lines or [""]


def split_words(text: str) -> List[Tuple[str, str]]:
    """
    Split visible text into ``(word, trailing_whitespace)`` pairs.

    Each whitespace character closes the running word, so spacing stays attached
    to the word before it. A run of several spaces yields empty-word pairs.
    """
    words: List[Tuple[str, str]] = []
    current: List[str] = []
    for char in text:
        if char.isspace():
            words.append(("".join(current), char))
            current = []
        else:
            current.append(char)
    if current:
        words.append(("".join(current), ""))
    return words


def _place_word(
    acc: _LineAccumulator, word: str, trailing: str, style: ActiveStyleState
) -> None:
    if acc.width + len(word) <= acc.max_width:
        acc.append(word, len(word))
    elif acc.width == 0:
        acc.hard_break(word, style)
    else:
        acc.break_line(style)
        # Fresh lines start at the word itself; ``word`` never carries leading whitespace.
        if len(word) <= acc.max_width:
            acc.append(word, len(word))
        else:
            acc.hard_break(word, style)
    acc.append_trailing(trailing)


def wrap(text: Optional[str], max_width: int) -> List[str]:
    """
    Wrap ``text`` at word boundaries so no line is wider than ``max_width`` visible columns.

    Escape sequences are copied through verbatim. When a break happens while
    styles are open, the line is closed with a reset and the next line starts by
    re-emitting the open styles. Words longer than the width are broken across
    lines character by character.

    Parameters:
        text (Optional[str]): Text to wrap; may contain colour codes and hyperlinks.
        max_width (int): Maximum visible width per line; values below 1 are treated as 1.

    Returns:
        List[str]: The wrapped lines, never empty (``[""]`` for empty input).
    """
    if not text:
        return [""]
    acc = _LineAccumulator(max(1, max_width))
    style = ActiveStyleState()
    for segment in scan_segments(text):
        if segment.is_escape:
            acc.append(segment.text, 0)
            style = style.apply(segment.text)
            continue
        for word, trailing in split_words(segment.text):
            _place_word(acc, word, trailing, style)
    return acc.finish()


__all__ = ["ActiveStyleState", "split_words", "wrap"]
