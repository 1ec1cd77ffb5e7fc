"""Box-drawing glyph tables for borders and rules."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class BorderStyle(str, Enum):
    """Visual style of widget borders."""

    NONE = "none"
    ROUNDED = "rounded"
    SQUARE = "square"
    DOUBLED = "doubled"
    HEAVY = "heavy"


class LineStyle(str, Enum):
    """Visual style of horizontal rules."""

    THIN = "thin"
    DOUBLED = "doubled"
    HEAVY = "heavy"


@dataclass(frozen=True)
class BoxGlyphs:
    """Characters needed to draw a box or a table grid."""

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    top_t: str
    bottom_t: str
    left_t: str
    right_t: str
    cross: str


# No rounded junctions exist, so ROUNDED shares SQUARE's T pieces and cross.
_BOX_GLYPHS: Dict[BorderStyle, BoxGlyphs] = {
    BorderStyle.NONE: BoxGlyphs(*(" " * 11)),
    BorderStyle.ROUNDED: BoxGlyphs("╭", "╮", "╰", "╯", "─", "│", "┬", "┴", "├", "┤", "┼"),
    BorderStyle.SQUARE: BoxGlyphs("┌", "┐", "└", "┘", "─", "│", "┬", "┴", "├", "┤", "┼"),
    BorderStyle.DOUBLED: BoxGlyphs("╔", "╗", "╚", "╝", "═", "║", "╦", "╩", "╠", "╣", "╬"),
    BorderStyle.HEAVY: BoxGlyphs("┏", "┓", "┗", "┛", "━", "┃", "┳", "┻", "┣", "┫", "╋"),
}

_LINE_GLYPHS: Dict[LineStyle, str] = {
    LineStyle.THIN: "─",
    LineStyle.DOUBLED: "═",
    LineStyle.HEAVY: "━",
}


def box_glyphs(style: BorderStyle) -> BoxGlyphs:
    """Return the glyph set for ``style``."""

    return _BOX_GLYPHS[BorderStyle(style)]


def line_glyph(style: LineStyle) -> str:
    """Return the horizontal character for ``style``."""

    return _LINE_GLYPHS[LineStyle(style)]


__all__ = ["BorderStyle", "BoxGlyphs", "LineStyle", "box_glyphs", "line_glyph"]
