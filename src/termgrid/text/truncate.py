"""Ellipsis truncation for over-wide cells."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from .ansi import strip_escapes

ELLIPSIS = "..."


class TruncateMode(str, Enum):
    """Where the ellipsis goes when content is cut to fit."""

    END = "end"
    START = "start"
    MIDDLE = "middle"


def truncate(
    text: Optional[str], max_width: int, mode: TruncateMode = TruncateMode.END
) -> str:
    """
    Shorten ``text`` so its visible length is at most ``max_width``.

    Text that already fits is returned unchanged, escape sequences included.
    Otherwise the escape sequences are dropped and the plain text is cut,
    with ``...`` placed according to ``mode``. Widths of 3 or less leave no
    room for content and produce that many dots.

    Parameters:
        text (Optional[str]): The text to shorten.
        max_width (int): Maximum visible width of the result.
        mode (TruncateMode): Ellipsis placement.

    Returns:
        str: Text whose visible length is <= ``max_width``.
    """
    if max_width <= len(ELLIPSIS):
        return "." * max(0, max_width)
    plain = strip_escapes(text)
    if len(plain) <= max_width:
        return text or ""
    available = max_width - len(ELLIPSIS)
    if mode is TruncateMode.START:
        return ELLIPSIS + plain[len(plain) - available :]
    if mode is TruncateMode.MIDDLE:
        head = (available + 1) // 2
        tail = available - head
        return plain[:head] + ELLIPSIS + plain[len(plain) - tail :]
    return plain[:available] + ELLIPSIS


__all__ = ["ELLIPSIS", "TruncateMode", "truncate"]
