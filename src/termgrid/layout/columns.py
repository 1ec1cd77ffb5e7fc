"""Column width allocation for tables fitted to a target width."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..text.ansi import visible_length

logger = logging.getLogger(__name__)

# Room for "..." plus one character of content.
DEFAULT_MIN_WIDTH = 4


@dataclass(frozen=True)
class ColumnFit:
    """Per-column sizing limits used by the allocator."""

    min_width: Optional[int] = None
    max_width: Optional[int] = None

    @property
    def minimum(self) -> int:
        return DEFAULT_MIN_WIDTH if self.min_width is None else max(0, self.min_width)

    @property
    def maximum(self) -> Optional[int]:
        """
        Effective maximum width, or None when the column is unbounded.

        An explicit minimum larger than the maximum wins: the maximum is raised
        to the minimum so the two limits never contradict each other.
        """
        if self.max_width is None:
            return None
        if self.min_width is not None and self.min_width > self.max_width:
            logger.debug(
                "Column min_width %d exceeds max_width %d; using the minimum",
                self.min_width,
                self.max_width,
            )
            return self.min_width
        return max(0, self.max_width)


def table_overhead(column_count: int, *, bordered: bool) -> int:
    """
    Count the characters a table row spends on borders, padding, and separators.

    A bordered row ``│ a │ b │`` uses two outer verticals, ``n - 1`` inner
    separators, and one space of padding on each side of every cell. A
    borderless row separates cells with two spaces.
    """
    if column_count <= 0:
        return 0
    if bordered:
        return 2 + (column_count - 1) + 2 * column_count
    return (column_count - 1) * 2


def natural_widths(
    headers: Sequence[str],
    rows: Sequence[Sequence[Optional[str]]],
    fits: Sequence[ColumnFit],
) -> List[int]:
    """
    Measure each column's natural width from its header and cells.

    Parameters:
        headers (Sequence[str]): Column headers, one per column.
        rows (Sequence[Sequence[Optional[str]]]): Data rows; short rows leave
            trailing columns unmeasured and extra cells are ignored.
        fits (Sequence[ColumnFit]): Sizing limits; a column's natural width is
            clamped to its maximum when one is set.

    Returns:
        List[int]: Visible widths, one per header.
    """
    widths: List[int] = []
    for index, header in enumerate(headers):
        width = visible_length(header)
        for row in rows:
            if index < len(row):
                width = max(width, visible_length(row[index]))
        maximum = fits[index].maximum if index < len(fits) else None
        if maximum is not None:
            width = min(width, maximum)
        widths.append(width)
    return widths


def _expand(widths: List[int], extra: int) -> List[int]:
    count = len(widths)
    per_column, remainder = divmod(extra, count)
    return [
        width + per_column + (1 if index < remainder else 0)
        for index, width in enumerate(widths)
    ]


def _shrink(widths: List[int], minimums: Sequence[int], excess: int) -> List[int]:
    shrinkable = [max(0, width - minimum) for width, minimum in zip(widths, minimums)]
    pool = sum(shrinkable)
    if pool <= 0:
        return widths
    remaining = min(excess, pool)
    result = list(widths)
    for index, amount in enumerate(shrinkable):
        if amount <= 0:
            continue
        # ceil(amount / pool * remaining) in integer arithmetic
        share = -(-(amount * remaining) // pool)
        share = min(share, amount)
        result[index] -= share
        pool -= amount
        remaining -= share
    return result


def allocate_column_widths(
    natural: Sequence[int],
    target_width: int,
    *,
    fits: Optional[Sequence[ColumnFit]] = None,
    bordered: bool = True,
    expand: bool = False,
    shrink: bool = True,
) -> List[int]:
    """
    Fit natural column widths to ``target_width``.

    With ``expand`` (bordered tables only) a table narrower than the target
    grows: the spare width is split evenly and any remainder goes one unit at
    a time to the leftmost columns. Otherwise, with ``shrink``, a table wider
    than the target gives up width in proportion to how far each column sits
    above its minimum. Each column's share is the ceiling of its proportion of
    the still-unallocated excess, so earlier columns take their full rounded
    share and later ones absorb the slack. Shrinking never goes below a
    column's minimum, so a target narrower than the minimums still produces a
    wider table.

    Parameters:
        natural (Sequence[int]): Natural widths from :func:`natural_widths`.
        target_width (int): Total width the rendered table should occupy.
        fits (Optional[Sequence[ColumnFit]]): Per-column limits; defaults apply when omitted.
        bordered (bool): Whether borders and cell padding are drawn.
        expand (bool): Grow columns to fill the target width.
        shrink (bool): Shrink columns to fit the target width.

    Returns:
        List[int]: Content width allocated to each column.
    """
    widths = list(natural)
    count = len(widths)
    if count == 0:
        return widths
    column_fits = list(fits or [])
    column_fits.extend(ColumnFit() for _ in range(count - len(column_fits)))

    overhead = table_overhead(count, bordered=bordered)
    total = overhead + sum(widths)

    if expand and bordered and total < target_width:
        widths = _expand(widths, target_width - total)
        logger.debug("Expanded columns from %d to %d: %s", total, target_width, widths)
    elif shrink and total > target_width:
        if target_width - overhead > 0:
            minimums = [fit.minimum for fit in column_fits[:count]]
            widths = _shrink(widths, minimums, total - target_width)
            logger.debug(
                "Shrunk columns from %d toward %d: %s",
                total,
                target_width,
                widths,
            )
        else:
            logger.debug(
                "Target width %d leaves no room after %d overhead; columns unchanged",
                target_width,
                overhead,
            )
    return widths


__all__ = [
    "DEFAULT_MIN_WIDTH",
    "ColumnFit",
    "allocate_column_widths",
    "natural_widths",
    "table_overhead",
]
