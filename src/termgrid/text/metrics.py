"""Escape-aware padding and alignment helpers."""
from __future__ import annotations

from typing import Optional

from .ansi import visible_length


def pad_right(text: Optional[str], width: int, pad_char: str = " ") -> str:
    """
    Pad ``text`` on the right so its visible (escape-stripped) length reaches ``width``.

    Parameters:
        text (Optional[str]): The input string, may include escape sequences.
        width (int): Target visible width in characters.
        pad_char (str): Single character used for padding.

    Returns:
        str: The original string if its visible length is >= ``width``, otherwise
        the string followed by enough ``pad_char`` to make the visible length equal ``width``.
    """
    if not text:
        return pad_char * max(0, width)
    visible = visible_length(text)
    if visible >= width:
        return text
    return text + pad_char * (width - visible)


def pad_left(text: Optional[str], width: int, pad_char: str = " ") -> str:
    """Right-align ``text`` within ``width`` visible columns; see :func:`pad_right`."""

    if not text:
        return pad_char * max(0, width)
    visible = visible_length(text)
    if visible >= width:
        return text
    return pad_char * (width - visible) + text


def center(text: Optional[str], width: int, pad_char: str = " ") -> str:
    """Center ``text`` within ``width`` visible columns, odd padding going to the right."""

    if not text:
        return pad_char * max(0, width)
    visible = visible_length(text)
    if visible >= width:
        return text
    total = width - visible
    left = total // 2
    return pad_char * left + text + pad_char * (total - left)


__all__ = ["center", "pad_left", "pad_right"]
