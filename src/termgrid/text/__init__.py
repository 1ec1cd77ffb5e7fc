"""Escape-aware text primitives."""

from .ansi import (
    ANSI_ESCAPE_RE,
    ANSI_RESET,
    Segment,
    SegmentKind,
    create_link,
    scan_segments,
    strip_escapes,
    style,
    visible_length,
)
from .metrics import center, pad_left, pad_right
from .truncate import TruncateMode, truncate
from .wrap import ActiveStyleState, wrap

__all__ = [
    "ANSI_ESCAPE_RE",
    "ANSI_RESET",
    "ActiveStyleState",
    "Segment",
    "SegmentKind",
    "TruncateMode",
    "center",
    "create_link",
    "pad_left",
    "pad_right",
    "scan_segments",
    "strip_escapes",
    "style",
    "truncate",
    "visible_length",
    "wrap",
]
