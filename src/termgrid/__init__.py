"""ANSI-aware text layout for terminal tables, panels, and rules."""

from .config_loader import ConfigError, TermgridError, load_config
from .layout.columns import ColumnFit, allocate_column_widths, natural_widths, table_overhead
from .terminal import (
    AnsiColorMapper,
    link,
    supports_hyperlinks,
    terminal_width,
    write_lines,
    write_panel,
    write_rule,
    write_table,
)
from .text.ansi import (
    ANSI_RESET,
    Segment,
    SegmentKind,
    create_link,
    scan_segments,
    strip_escapes,
    style,
    visible_length,
)
from .text.metrics import center, pad_left, pad_right
from .text.truncate import TruncateMode, truncate
from .text.wrap import ActiveStyleState, wrap
from .widgets.glyphs import BorderStyle, BoxGlyphs, LineStyle
from .widgets.panel import Panel, PanelBuilder
from .widgets.rule import Rule, RuleBuilder
from .widgets.table import Alignment, Table, TableBuilder, TableColumn

__version__ = "0.1.0"

__all__ = [
    "ANSI_RESET",
    "ActiveStyleState",
    "Alignment",
    "AnsiColorMapper",
    "BorderStyle",
    "BoxGlyphs",
    "ColumnFit",
    "ConfigError",
    "LineStyle",
    "Panel",
    "PanelBuilder",
    "Rule",
    "RuleBuilder",
    "Segment",
    "SegmentKind",
    "Table",
    "TableBuilder",
    "TableColumn",
    "TermgridError",
    "TruncateMode",
    "allocate_column_widths",
    "center",
    "create_link",
    "link",
    "load_config",
    "natural_widths",
    "pad_left",
    "pad_right",
    "scan_segments",
    "strip_escapes",
    "style",
    "supports_hyperlinks",
    "table_overhead",
    "terminal_width",
    "truncate",
    "visible_length",
    "wrap",
    "write_lines",
    "write_panel",
    "write_rule",
    "write_table",
]
