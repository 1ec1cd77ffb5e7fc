"""Rule widget: a horizontal divider with an optional centered title."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from ..text.ansi import style, visible_length
from ..text.truncate import truncate
from .glyphs import LineStyle, line_glyph


@dataclass(frozen=True)
class Rule:
    """
    Horizontal line spanning ``width`` (or the render width) columns.

    ``color`` applies to the line glyphs only, so a styled title keeps its
    own colours.
    """

    title: Optional[str] = None
    line_style: LineStyle = LineStyle.THIN
    color: Optional[str] = None
    width: Optional[int] = None

    def render(self, terminal_width: int = 80) -> str:
        width = max(0, self.width if self.width is not None else terminal_width)
        glyph = line_glyph(self.line_style)
        if not self.title:
            return style(glyph * width, self.color)

        title_width = visible_length(self.title)
        # glyph, space, title, space, glyph
        if width < title_width + 4:
            return truncate(self.title, width) if title_width > width else self.title

        available = width - title_width - 2
        left = available // 2
        right = available - left
        return f"{style(glyph * left, self.color)} {self.title} {style(glyph * right, self.color)}"

    def render_lines(self, terminal_width: int = 80) -> List[str]:
        """Render as a one-element list, matching the other widgets' shape."""

        return [self.render(terminal_width)]


class RuleBuilder:
    """Fluent construction of :class:`Rule` values."""

    def __init__(self) -> None:
        self._rule = Rule()

    def title(self, title: str) -> RuleBuilder:
        self._rule = replace(self._rule, title=title)
        return self

    def line_style(self, line_style: LineStyle) -> RuleBuilder:
        self._rule = replace(self._rule, line_style=LineStyle(line_style))
        return self

    def color(self, color: Optional[str]) -> RuleBuilder:
        self._rule = replace(self._rule, color=color or None)
        return self

    def width(self, width: Optional[int]) -> RuleBuilder:
        self._rule = replace(self._rule, width=width)
        return self

    def build(self) -> Rule:
        return self._rule


__all__ = ["Rule", "RuleBuilder"]
