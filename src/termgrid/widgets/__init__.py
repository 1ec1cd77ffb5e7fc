"""Renderable widgets built on the text and layout primitives."""

from .glyphs import BorderStyle, BoxGlyphs, LineStyle, box_glyphs, line_glyph
from .panel import Panel, PanelBuilder
from .rule import Rule, RuleBuilder
from .table import Alignment, Table, TableBuilder, TableColumn

__all__ = [
    "Alignment",
    "BorderStyle",
    "BoxGlyphs",
    "LineStyle",
    "Panel",
    "PanelBuilder",
    "Rule",
    "RuleBuilder",
    "Table",
    "TableBuilder",
    "TableColumn",
    "box_glyphs",
    "line_glyph",
]
