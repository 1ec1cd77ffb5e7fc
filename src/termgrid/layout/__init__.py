"""Width allocation for tabular layouts."""

from .columns import (
    DEFAULT_MIN_WIDTH,
    ColumnFit,
    allocate_column_widths,
    natural_widths,
    table_overhead,
)

__all__ = [
    "DEFAULT_MIN_WIDTH",
    "ColumnFit",
    "allocate_column_widths",
    "natural_widths",
    "table_overhead",
]
