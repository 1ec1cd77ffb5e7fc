"""Escape-sequence scanning and plain-text metrics."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

# CSI colour/style codes and OSC 8 hyperlinks terminated by ESC \ or BEL.
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m|\x1b\]8;;[^\x07\x1b]*(?:\x1b\\|\x07)")
ANSI_RESET = "\x1b[0m"

HYPERLINK_PREFIX = "\x1b]8;;"
HYPERLINK_TERMINATOR = "\x1b\\"
_BEL = "\x07"
_RESET_CODES = frozenset({ANSI_RESET, "\x1b[m"})


class SegmentKind(str, Enum):
    """Classification of a scanned run of text."""

    ESCAPE = "escape"
    VISIBLE = "visible"


@dataclass(frozen=True)
class Segment:
    """A contiguous slice of the scanned string."""

    text: str
    kind: SegmentKind

    @property
    def is_escape(self) -> bool:
        return self.kind is SegmentKind.ESCAPE


def scan_segments(text: Optional[str]) -> List[Segment]:
    """
    Partition ``text`` into alternating escape and visible segments.

    The segments cover the input exactly, in order, so joining their ``text``
    values reproduces the original string. Escape openers that are not
    terminated (for example a string cut off mid-sequence) do not match the
    escape pattern and are reported as visible text.

    Parameters:
        text (Optional[str]): String that may contain colour codes or hyperlinks.

    Returns:
        List[Segment]: Ordered segments; empty for ``None`` or ``""``.
    """
    if not text:
        return []
    segments: List[Segment] = []
    last_end = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        start, end = match.span()
        if start > last_end:
            segments.append(Segment(text[last_end:start], SegmentKind.VISIBLE))
        segments.append(Segment(match.group(0), SegmentKind.ESCAPE))
        last_end = end
    if last_end < len(text):
        segments.append(Segment(text[last_end:], SegmentKind.VISIBLE))
    return segments


def strip_escapes(text: Optional[str]) -> str:
    """Return ``text`` with every colour code and hyperlink sequence removed."""

    if not text:
        return ""
    return ANSI_ESCAPE_RE.sub("", text)


def visible_length(text: Optional[str]) -> int:
    """
    Compute the visible character length of a string excluding escape sequences.

    Returns:
        int: Number of characters left after stripping escapes; ``0`` for empty input.
    """
    if not text:
        return 0
    return len(strip_escapes(text))


def is_reset(code: str) -> bool:
    """Return True when ``code`` is a plain SGR reset (``ESC[0m`` or ``ESC[m``)."""

    return code in _RESET_CODES


def hyperlink_target(code: str) -> Optional[str]:
    """
    Extract the URL carried by an OSC 8 hyperlink sequence.

    Returns:
        Optional[str]: The target (``""`` for a link close), or ``None`` when
        ``code`` is not a complete hyperlink sequence.
    """
    if not code.startswith(HYPERLINK_PREFIX):
        return None
    if code.endswith(HYPERLINK_TERMINATOR):
        return code[len(HYPERLINK_PREFIX) : -len(HYPERLINK_TERMINATOR)]
    if code.endswith(_BEL):
        return code[len(HYPERLINK_PREFIX) : -len(_BEL)]
    return None


def create_link(text: str, url: str) -> str:
    """Wrap ``text`` in an OSC 8 hyperlink pointing at ``url``."""

    opener = f"{HYPERLINK_PREFIX}{url}{HYPERLINK_TERMINATOR}"
    closer = f"{HYPERLINK_PREFIX}{HYPERLINK_TERMINATOR}"
    return f"{opener}{text}{closer}"


def style(text: str, code: Optional[str]) -> str:
    """Prefix ``text`` with ``code`` and close it with a reset; no-op for an empty code."""

    if not code:
        return text
    return f"{code}{text}{ANSI_RESET}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "ANSI_RESET",
    "HYPERLINK_PREFIX",
    "HYPERLINK_TERMINATOR",
    "Segment",
    "SegmentKind",
    "create_link",
    "hyperlink_target",
    "is_reset",
    "scan_segments",
    "strip_escapes",
    "style",
    "visible_length",
]
