"""Panel widget: a bordered box with an optional header label."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from ..text.ansi import style, visible_length
from ..text.metrics import pad_right
from ..text.truncate import truncate
from ..text.wrap import wrap
from .glyphs import BorderStyle, BoxGlyphs, box_glyphs

MIN_PANEL_WIDTH = 4


@dataclass(frozen=True)
class Panel:
    """
    Bordered box around free-form content.

    ``content`` may span several lines (``\\n``) and contain escape sequences.
    ``width`` fixes the total width; when unset the panel fills the width
    passed to :meth:`render`.
    """

    content: Optional[str] = None
    header: Optional[str] = None
    border: BorderStyle = BorderStyle.ROUNDED
    border_color: Optional[str] = None
    padding_horizontal: int = 1
    padding_vertical: int = 0
    width: Optional[int] = None
    word_wrap: bool = True

    def render(self, terminal_width: int = 80) -> List[str]:
        """
        Render the panel into output lines.

        Borderless panels return the raw content lines. Bordered panels are
        ``width`` (or ``terminal_width``) columns wide, at least 4; every body
        line is wrapped or truncated to the content area and padded flush with
        the right border.

        Parameters:
            terminal_width (int): Width used when the panel has no fixed width.

        Returns:
            List[str]: One string per output line.
        """
        if self.border is BorderStyle.NONE:
            return self.content.split("\n") if self.content else []

        width = max(self.width if self.width is not None else terminal_width, MIN_PANEL_WIDTH)
        glyphs = box_glyphs(self.border)
        # Padding gives way before the content area drops below one column.
        padding = min(max(0, self.padding_horizontal), (width - 3) // 2)
        content_width = width - 2 - 2 * padding

        body = self._content_lines(content_width)
        blank = self._content_row("", glyphs, content_width, padding)
        vertical_padding = [blank] * max(0, self.padding_vertical)

        lines = [self._top_border(width, glyphs)]
        lines.extend(vertical_padding)
        lines.extend(self._content_row(line, glyphs, content_width, padding) for line in body)
        if not body:
            lines.append(blank)
        lines.extend(vertical_padding)
        bottom = f"{glyphs.bottom_left}{glyphs.horizontal * (width - 2)}{glyphs.bottom_right}"
        lines.append(style(bottom, self.border_color))
        return lines

    def _content_lines(self, content_width: int) -> List[str]:
        if not self.content:
            return []
        lines: List[str] = []
        for raw in self.content.split("\n"):
            if self.word_wrap:
                lines.extend(wrap(raw, content_width))
            elif visible_length(raw) > content_width:
                lines.append(truncate(raw, content_width))
            else:
                lines.append(raw)
        return lines

    def _top_border(self, width: int, glyphs: BoxGlyphs) -> str:
        plain = f"{glyphs.top_left}{glyphs.horizontal * (width - 2)}{glyphs.top_right}"
        if not self.header:
            return style(plain, self.border_color)
        header_width = visible_length(self.header)
        # corner, dash, space, header, space, dash, corner
        if width < header_width + 6:
            return style(plain, self.border_color)
        left = style(f"{glyphs.top_left}{glyphs.horizontal}", self.border_color)
        right_run = glyphs.horizontal * (width - 6 - header_width)
        right = style(f"{right_run}{glyphs.horizontal}{glyphs.top_right}", self.border_color)
        return f"{left} {self.header} {right}"

    def _content_row(self, content: str, glyphs: BoxGlyphs, content_width: int, padding: int) -> str:
        vertical = style(glyphs.vertical, self.border_color)
        gap = " " * padding
        return f"{vertical}{gap}{pad_right(content, content_width)}{gap}{vertical}"


class PanelBuilder:
    """Fluent construction of :class:`Panel` values."""

    def __init__(self) -> None:
        self._panel = Panel()

    def header(self, header: str) -> PanelBuilder:
        self._panel = replace(self._panel, header=header)
        return self

    def content(self, content: str) -> PanelBuilder:
        self._panel = replace(self._panel, content=content)
        return self

    def border(self, border: BorderStyle) -> PanelBuilder:
        self._panel = replace(self._panel, border=BorderStyle(border))
        return self

    def border_color(self, color: Optional[str]) -> PanelBuilder:
        self._panel = replace(self._panel, border_color=color or None)
        return self

    def padding(self, horizontal: int, vertical: int) -> PanelBuilder:
        self._panel = replace(
            self._panel, padding_horizontal=horizontal, padding_vertical=vertical
        )
        return self

    def padding_horizontal(self, padding: int) -> PanelBuilder:
        self._panel = replace(self._panel, padding_horizontal=padding)
        return self

    def padding_vertical(self, padding: int) -> PanelBuilder:
        self._panel = replace(self._panel, padding_vertical=padding)
        return self

    def width(self, width: Optional[int]) -> PanelBuilder:
        self._panel = replace(self._panel, width=width)
        return self

    def word_wrap(self, value: bool) -> PanelBuilder:
        self._panel = replace(self._panel, word_wrap=value)
        return self

    def build(self) -> Panel:
        return self._panel


__all__ = ["MIN_PANEL_WIDTH", "Panel", "PanelBuilder"]
