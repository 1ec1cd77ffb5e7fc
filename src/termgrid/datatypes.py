"""Configuration dataclasses for termgrid rendering defaults."""
from dataclasses import dataclass, field

from .widgets.glyphs import BorderStyle, LineStyle


@dataclass
class OutputConfig:
    """Where and how rendered lines are written."""

    width: int = 0
    no_color: bool = False


@dataclass
class TableConfig:
    """Default presentation for tables."""

    border: BorderStyle = BorderStyle.SQUARE
    show_headers: bool = True
    show_row_separators: bool = False
    expand: bool = False
    shrink: bool = True
    border_color: str = ""
    header_color: str = ""


@dataclass
class PanelConfig:
    """Default presentation for panels."""

    border: BorderStyle = BorderStyle.ROUNDED
    padding_horizontal: int = 1
    padding_vertical: int = 0
    word_wrap: bool = True
    border_color: str = ""


@dataclass
class RuleConfig:
    """Default presentation for rules."""

    style: LineStyle = LineStyle.THIN
    color: str = ""


@dataclass
class AppConfig:
    """Aggregated configuration loaded from ``termgrid.toml``."""

    output: OutputConfig = field(default_factory=OutputConfig)
    table: TableConfig = field(default_factory=TableConfig)
    panel: PanelConfig = field(default_factory=PanelConfig)
    rule: RuleConfig = field(default_factory=RuleConfig)
