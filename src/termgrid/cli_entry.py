"""Click CLI wiring and entry points for termgrid."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, TextIO, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler

from .config_loader import ConfigError, load_config, resolve_config_path
from .datatypes import AppConfig
from .terminal import AnsiColorMapper, terminal_width, write_panel, write_rule, write_table
from .text.truncate import TruncateMode
from .widgets.glyphs import BorderStyle, LineStyle
from .widgets.panel import PanelBuilder
from .widgets.rule import RuleBuilder
from .widgets.table import Alignment, TableBuilder

logger = logging.getLogger(__name__)

_BORDER_CHOICES = [style.value for style in BorderStyle]
_LINE_CHOICES = [style.value for style in LineStyle]


@dataclass
class CliState:
    """Per-invocation settings shared with subcommands through ``ctx.obj``."""

    config: AppConfig
    console: Console
    colors: AnsiColorMapper
    width: int


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_text_argument(value: Optional[str]) -> str:
    """Return ``value``, reading standard input when it is ``-`` or omitted."""

    if value is not None and value != "-":
        return value
    stream = click.get_text_stream("stdin")
    return stream.read().rstrip("\n")


def _parse_assignments(values: Sequence[str], option: str) -> List[Tuple[str, str]]:
    """Split repeated ``COL=VALUE`` options into pairs."""

    pairs: List[Tuple[str, str]] = []
    for raw in values:
        column, sep, setting = raw.partition("=")
        if not sep or not column.strip() or not setting.strip():
            raise click.BadParameter(f"expected COL=VALUE, got {raw!r}", param_hint=option)
        pairs.append((column.strip(), setting.strip()))
    return pairs


def _resolve_column(headers: Sequence[str], key: str, option: str) -> int:
    """
    Map a column reference to its index.

    ``key`` is either a header name or a 1-based column number.
    """
    if key in headers:
        return list(headers).index(key)
    if key.isdigit() and 1 <= int(key) <= len(headers):
        return int(key) - 1
    raise click.BadParameter(f"unknown column {key!r}", param_hint=option)


def _column_overrides(
    headers: Sequence[str],
    align: Sequence[str],
    max_width: Sequence[str],
    truncate_mode: Sequence[str],
) -> Dict[int, Dict[str, object]]:
    overrides: Dict[int, Dict[str, object]] = {}
    for key, value in _parse_assignments(align, "--align"):
        try:
            alignment = Alignment(value.lower())
        except ValueError as exc:
            choices = ", ".join(member.value for member in Alignment)
            raise click.BadParameter(f"{value!r} is not one of: {choices}", param_hint="--align") from exc
        overrides.setdefault(_resolve_column(headers, key, "--align"), {})["alignment"] = alignment
    for key, value in _parse_assignments(max_width, "--max-width"):
        if not value.isdigit() or int(value) < 1:
            raise click.BadParameter(f"{value!r} is not a positive integer", param_hint="--max-width")
        overrides.setdefault(_resolve_column(headers, key, "--max-width"), {})["max_width"] = int(value)
    for key, value in _parse_assignments(truncate_mode, "--truncate"):
        try:
            mode = TruncateMode(value.lower())
        except ValueError as exc:
            choices = ", ".join(member.value for member in TruncateMode)
            raise click.BadParameter(f"{value!r} is not one of: {choices}", param_hint="--truncate") from exc
        overrides.setdefault(_resolve_column(headers, key, "--truncate"), {})["truncate_mode"] = mode
    return overrides


def _read_csv(stream: TextIO) -> Tuple[List[str], List[List[str]]]:
    rows = [row for row in csv.reader(stream)]
    if not rows:
        raise click.ClickException("CSV input is empty.")
    return rows[0], rows[1:]


@click.group()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to termgrid.toml. Defaults to TERMGRID_CONFIG or ~/.config/termgrid/termgrid.toml.",
)
@click.option(
    "--width",
    type=click.IntRange(min=1),
    default=None,
    help="Render width in columns. Overrides [output].width and terminal detection.",
)
@click.option("--no-color", is_flag=True, help="Disable ANSI colour output.")
@click.option("--verbose", is_flag=True, help="Show debug logging on stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Optional[str],
    width: Optional[int],
    no_color: bool,
    verbose: bool,
) -> None:
    """Render tables, panels, and rules with ANSI-aware layout."""

    _configure_logging(verbose)
    try:
        config = load_config(resolve_config_path(config_path))
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    no_color = no_color or config.output.no_color
    console = Console(no_color=no_color, highlight=False)
    render_width = width or config.output.width or terminal_width(console)
    logger.debug("Rendering at width %d (no_color=%s)", render_width, no_color)
    ctx.obj = CliState(
        config=config,
        console=console,
        colors=AnsiColorMapper(no_color=no_color),
        width=render_width,
    )


@main.command("rule")
@click.argument("title", required=False)
@click.option(
    "--style",
    "line_style",
    type=click.Choice(_LINE_CHOICES, case_sensitive=False),
    default=None,
    help="Line glyph. Overrides [rule].style.",
)
@click.option("--color", default=None, help="Colour token for the line, e.g. cyan or grey.dim.")
@click.pass_obj
def rule_command(
    state: CliState, title: Optional[str], line_style: Optional[str], color: Optional[str]
) -> None:
    """Print a horizontal rule, optionally with a centred TITLE."""

    defaults = state.config.rule
    builder = (
        RuleBuilder()
        .line_style(LineStyle(line_style.lower()) if line_style else defaults.style)
        .color(state.colors.code(color if color is not None else defaults.color))
    )
    if title:
        builder.title(title)
    write_rule(state.console, builder.build(), width=state.width)


@main.command("panel")
@click.argument("text", required=False)
@click.option("--header", default=None, help="Label embedded in the top border.")
@click.option(
    "--border",
    type=click.Choice(_BORDER_CHOICES, case_sensitive=False),
    default=None,
    help="Border style. Overrides [panel].border.",
)
@click.option(
    "--padding",
    type=(click.IntRange(min=0), click.IntRange(min=0)),
    default=None,
    metavar="H V",
    help="Horizontal and vertical padding inside the border.",
)
@click.option("--no-wrap", is_flag=True, help="Truncate long lines instead of wrapping them.")
@click.pass_obj
def panel_command(
    state: CliState,
    text: Optional[str],
    header: Optional[str],
    border: Optional[str],
    padding: Optional[Tuple[int, int]],
    no_wrap: bool,
) -> None:
    """Print TEXT inside a bordered panel. Reads standard input when TEXT is - or omitted."""

    defaults = state.config.panel
    horizontal, vertical = padding or (defaults.padding_horizontal, defaults.padding_vertical)
    builder = (
        PanelBuilder()
        .content(_read_text_argument(text))
        .border(BorderStyle(border.lower()) if border else defaults.border)
        .border_color(state.colors.code(defaults.border_color))
        .padding(horizontal, vertical)
        .word_wrap(defaults.word_wrap and not no_wrap)
    )
    if header:
        builder.header(header)
    write_panel(state.console, builder.build(), width=state.width)


@main.command("table")
@click.argument("csv_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--border",
    type=click.Choice(_BORDER_CHOICES, case_sensitive=False),
    default=None,
    help="Border style. Overrides [table].border.",
)
@click.option("--no-headers", is_flag=True, help="Treat the first CSV row as a header but do not print it.")
@click.option("--row-separators", is_flag=True, help="Draw a separator between data rows.")
@click.option("--expand", is_flag=True, help="Grow the table to fill the render width.")
@click.option("--no-shrink", is_flag=True, help="Keep natural column widths even when they overflow.")
@click.option("--align", multiple=True, metavar="COL=left|center|right", help="Column alignment (repeatable).")
@click.option("--max-width", multiple=True, metavar="COL=N", help="Maximum column width (repeatable).")
@click.option(
    "--truncate",
    "truncate_mode",
    multiple=True,
    metavar="COL=start|middle|end",
    help="Where to place the ellipsis in over-wide cells (repeatable).",
)
@click.pass_obj
def table_command(
    state: CliState,
    csv_file: TextIO,
    border: Optional[str],
    no_headers: bool,
    row_separators: bool,
    expand: bool,
    no_shrink: bool,
    align: Tuple[str, ...],
    max_width: Tuple[str, ...],
    truncate_mode: Tuple[str, ...],
) -> None:
    """
    Print CSV_FILE as a table. Reads standard input when CSV_FILE is - or omitted.

    Columns in --align, --max-width, and --truncate are referenced by header
    name or 1-based position.
    """
    defaults = state.config.table
    headers, rows = _read_csv(csv_file)
    overrides = _column_overrides(headers, align, max_width, truncate_mode)
    header_color = state.colors.code(defaults.header_color)

    builder = TableBuilder()
    for index, header in enumerate(headers):
        builder.add_column(header, header_color=header_color, **overrides.get(index, {}))  # type: ignore[arg-type]
    for row in rows:
        builder.add_row(*row)
    builder.border(BorderStyle(border.lower()) if border else defaults.border)
    builder.border_color(state.colors.code(defaults.border_color))
    builder.show_row_separators(row_separators or defaults.show_row_separators)
    builder.expand(expand or defaults.expand)
    builder.shrink(defaults.shrink and not no_shrink)
    if no_headers or not defaults.show_headers:
        builder.hide_headers()
    logger.debug("Table with %d columns and %d rows", len(headers), len(rows))
    write_table(state.console, builder.build(), width=state.width)


__all__ = ["CliState", "main"]
