"""Terminal output and color handling."""
from __future__ import annotations

import logging
import os
import shutil
from typing import Iterable, List, Mapping, Optional

from rich.console import Console
from rich.text import Text

from .text.ansi import ANSI_RESET, create_link
from .widgets.panel import Panel
from .widgets.rule import Rule
from .widgets.table import Table

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_WIDTH = 80
FORCE_256_ENV_VAR = "TERMGRID_FORCE_256_COLOR"


def _is_truthy_flag(raw_value: str) -> bool:
    """Return True when an environment-style flag requests enabling behavior."""

    normalized = raw_value.strip().lower()
    return bool(normalized) and normalized not in {"0", "false", "no", "off"}


class AnsiColorMapper:
    """Translate theme color tokens into ANSI escape sequences."""

    _TOKEN_CODES_16 = {
        "cyan": 36,
        "blue": 34,
        "green": 32,
        "yellow": 33,
        "orange": 33,
        "red": 31,
        "grey": 90,
        "gray": 90,
        "white": 37,
        "black": 30,
        "magenta": 35,
        "purple": 35,
    }

    _TOKEN_CODES_256 = {
        "cyan": 51,
        "blue": 75,
        "green": 84,
        "yellow": 184,
        "orange": 214,
        "red": 203,
        "grey": 240,
        "gray": 240,
        "white": 15,
        "black": 0,
        "magenta": 201,
        "purple": 177,
    }

    def __init__(self, *, no_color: bool = False, environ: Optional[Mapping[str, str]] = None) -> None:
        """
        Initialize the color mapper and determine the terminal color capability.

        Color is disabled when ``no_color`` is set or the ``NO_COLOR`` environment
        variable is non-empty; the capability is then ``"none"``. Otherwise the
        capability is detected from the environment.

        Parameters:
            no_color (bool): If True, force-disable all ANSI color output regardless of environment.
            environ (Optional[Mapping[str, str]]): Environment to inspect; defaults to ``os.environ``.
        """
        self._environ = os.environ if environ is None else environ
        self.no_color = no_color or bool(self._environ.get("NO_COLOR"))
        self._capability = "none" if self.no_color else self._detect_capability()

    @property
    def capability(self) -> str:
        return self._capability

    def _detect_capability(self) -> str:
        """
        Determine the terminal color capability based on environment variables.

        Returns:
            str: ``"256"`` when truecolor/256-color support is likely, otherwise ``"16"``.
        """
        if _is_truthy_flag(self._environ.get(FORCE_256_ENV_VAR, "")):
            return "256"
        colorterm = self._environ.get("COLORTERM", "").lower()
        if any(token in colorterm for token in ("truecolor", "24bit")):
            return "256"
        term = self._environ.get("TERM", "").lower()
        if "256color" in term or "truecolor" in term:
            return "256"
        if self._environ.get("WT_SESSION"):
            return "256"
        return "16"

    def code(self, token: Optional[str]) -> str:
        """
        Convert a color token into the SGR escape sequence for the detected capability.

        Parameters:
            token (Optional[str]): Color token such as ``"cyan"``, ``"green.bold"`` or
                ``"red.bright"``: a color name followed by optional dot-separated
                modifiers (``bright``, ``bold``, ``dim``).

        Returns:
            str: The escape sequence, or ``""`` when the token is empty, unknown,
            or color is disabled.
        """
        token = (token or "").strip()
        if not token or self._capability == "none":
            return ""
        parts = token.lower().split(".")
        color = parts[0]
        modifiers = {part for part in parts[1:] if part}

        attrs: List[str] = []
        if "bold" in modifiers:
            attrs.append("1")
        if "dim" in modifiers:
            attrs.append("2")

        if self._capability == "256":
            code = self._TOKEN_CODES_256.get(color)
            if code is None:
                logger.debug("Unknown color token %r", token)
                return ""
            attrs.append(f"38;5;{code}")
        else:
            base = self._TOKEN_CODES_16.get(color)
            if base is None:
                logger.debug("Unknown color token %r", token)
                return ""
            if "bright" in modifiers and 30 <= base <= 37:
                base += 60
            attrs.append(str(base))
        return f"\x1b[{';'.join(attrs)}m"

    def apply(self, token: Optional[str], text: str) -> str:
        """Wrap ``text`` in the SGR sequence for ``token`` and a reset; unchanged when unstyled."""

        if not text:
            return text
        sgr = self.code(token)
        if not sgr:
            return text
        return f"{sgr}{text}{ANSI_RESET}"


def supports_hyperlinks(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Guess whether the terminal renders OSC 8 hyperlinks.

    Recognises Windows Terminal, VS Code, iTerm2, Konsole, Hyper, and VTE 0.50+
    terminals from their environment variables; unknown terminals are assumed
    not to support links.
    """
    env = os.environ if environ is None else environ
    if env.get("WT_SESSION") or env.get("KONSOLE_VERSION"):
        return True
    if env.get("TERM_PROGRAM") in {"vscode", "iTerm.app", "Hyper"}:
        return True
    vte_version = env.get("VTE_VERSION", "")
    return vte_version.isdigit() and int(vte_version) >= 5000


def link(text: str, url: str, *, enabled: Optional[bool] = None) -> str:
    """Return ``text`` as a hyperlink to ``url`` when the terminal supports it."""

    if enabled is None:
        enabled = supports_hyperlinks()
    return create_link(text, url) if enabled else text


def terminal_width(console: Optional[Console] = None) -> int:
    """
    Determine the width to render widgets at.

    Prefers the Rich console's width, then its size, and finally the system
    terminal size, falling back to 80 columns when output is redirected.

    Returns:
        int: Number of columns available (at least 1).
    """
    if console is not None:
        width = getattr(console, "width", None)
        if isinstance(width, int) and width > 0:
            return width
        size = getattr(console, "size", None)
        width = getattr(size, "width", None)
        if isinstance(width, int) and width > 0:
            return width
    columns = shutil.get_terminal_size(fallback=(DEFAULT_TERMINAL_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def write_lines(console: Console, lines: Iterable[str]) -> None:
    """
    Print pre-rendered lines through ``console``.

    Lines are decoded with :meth:`rich.text.Text.from_ansi` so Rich re-encodes
    the styles for its color system (and drops them entirely under ``no_color``).
    Soft wrapping keeps Rich from re-flowing lines that are already laid out.
    """
    for line in lines:
        console.print(Text.from_ansi(line), soft_wrap=True)


def write_table(console: Console, table: Table, *, width: Optional[int] = None) -> None:
    write_lines(console, table.render(width or terminal_width(console)))


def write_panel(console: Console, panel: Panel, *, width: Optional[int] = None) -> None:
    write_lines(console, panel.render(width or terminal_width(console)))


def write_rule(console: Console, rule: Rule, *, width: Optional[int] = None) -> None:
    write_lines(console, rule.render_lines(width or terminal_width(console)))


__all__ = [
    "AnsiColorMapper",
    "DEFAULT_TERMINAL_WIDTH",
    "link",
    "supports_hyperlinks",
    "terminal_width",
    "write_lines",
    "write_panel",
    "write_rule",
    "write_table",
]
