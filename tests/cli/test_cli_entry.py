from pathlib import Path

import pytest
from click.testing import CliRunner

from termgrid.cli_entry import main

FRUIT_CSV = "name,qty\napple,3\n"


@pytest.fixture(autouse=True)
def _clean_env(isolated_env: Path) -> None:
    """Keep the host's config and colour settings out of CLI runs."""


def _lines(output: str) -> list[str]:
    return output.splitlines()


def test_rule_spans_width(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--width", "20", "rule"])

    assert result.exit_code == 0, result.output
    assert result.output == "─" * 20 + "\n"


def test_rule_with_title_and_style(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--width", "10", "rule", "Hi", "--style", "heavy", "--color", "cyan"])

    assert result.exit_code == 0, result.output
    assert _lines(result.output) == ["━━━ Hi ━━━"]


def test_panel_from_argument(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--width", "11", "panel", "hello"])

    assert result.exit_code == 0, result.output
    assert _lines(result.output) == ["╭─────────╮", "│ hello   │", "╰─────────╯"]


def test_panel_from_stdin_with_header_and_padding(runner: CliRunner) -> None:
    result = runner.invoke(
        main,
        ["--width", "12", "panel", "-", "--header", "Info", "--padding", "0", "0", "--border", "square"],
        input="hi\n",
    )

    assert result.exit_code == 0, result.output
    assert _lines(result.output) == ["┌─ Info ───┐", "│hi        │", "└──────────┘"]


def test_panel_no_wrap_truncates(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--width", "8", "panel", "abcdefghij", "--no-wrap"])

    assert result.exit_code == 0, result.output
    assert _lines(result.output)[1] == "│ a... │"


def test_table_from_file(runner: CliRunner, tmp_path: Path) -> None:
    csv_path = tmp_path / "fruit.csv"
    csv_path.write_text(FRUIT_CSV, encoding="utf-8")

    result = runner.invoke(main, ["--width", "80", "table", str(csv_path)])

    assert result.exit_code == 0, result.output
    assert _lines(result.output) == [
        "┌───────┬─────┐",
        "│ name  │ qty │",
        "├───────┼─────┤",
        "│ apple │ 3   │",
        "└───────┴─────┘",
    ]


def test_table_from_stdin_with_column_options(runner: CliRunner) -> None:
    result = runner.invoke(
        main,
        ["--width", "80", "table", "--align", "qty=right", "--max-width", "1=4", "--truncate", "name=start"],
        input=FRUIT_CSV,
    )

    assert result.exit_code == 0, result.output
    assert _lines(result.output)[3] == "│ ...e │   3 │"


def test_table_borderless_without_headers(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--width", "80", "table", "--border", "none", "--no-headers"], input=FRUIT_CSV)

    assert result.exit_code == 0, result.output
    assert [line.rstrip() for line in _lines(result.output)] == ["apple  3"]


def test_table_shrinks_to_width(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--width", "20", "table"], input="A,B\n" + "x" * 30 + ",y\n")

    assert result.exit_code == 0, result.output
    assert all(len(line) == 20 for line in _lines(result.output))


@pytest.mark.parametrize(
    "args",
    [
        ["--align", "qty=sideways"],
        ["--align", "missing=left"],
        ["--max-width", "qty=0"],
        ["--truncate", "qty"],
    ],
)
def test_table_rejects_bad_column_options(runner: CliRunner, args: list[str]) -> None:
    result = runner.invoke(main, ["table", *args], input=FRUIT_CSV)

    assert result.exit_code == 2


def test_empty_csv_is_an_error(runner: CliRunner) -> None:
    result = runner.invoke(main, ["table"], input="")

    assert result.exit_code == 1
    assert "CSV input is empty" in result.output


def test_missing_config_is_reported(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(main, ["--config", str(tmp_path / "nope.toml"), "rule"])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_invalid_config_is_reported(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "termgrid.toml"
    config.write_text('[table]\nborder = "dotted"\n', encoding="utf-8")

    result = runner.invoke(main, ["--config", str(config), "rule"])

    assert result.exit_code == 1
    assert "table.border must be one of" in result.output


def test_config_supplies_defaults(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "termgrid.toml"
    config.write_text('[output]\nwidth = 12\n\n[table]\nborder = "none"\n\n[rule]\nstyle = "doubled"\n', encoding="utf-8")

    rule = runner.invoke(main, ["--config", str(config), "rule"])
    table = runner.invoke(main, ["--config", str(config), "table"], input=FRUIT_CSV)

    assert rule.output == "═" * 12 + "\n"
    assert _lines(table.output)[0] == "name   qty"


def test_config_discovered_from_environment(runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = tmp_path / "env.toml"
    config.write_text("[output]\nwidth = 5\n", encoding="utf-8")
    monkeypatch.setenv("TERMGRID_CONFIG", str(config))

    result = runner.invoke(main, ["rule"])

    assert result.output == "─" * 5 + "\n"


def test_output_has_no_escapes_when_not_a_terminal(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--width", "10", "rule", "T", "--color", "red.bold"])

    assert result.exit_code == 0
    assert "\x1b" not in result.output


def test_verbose_and_no_color_flags(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--verbose", "--no-color", "--width", "4", "rule"])

    assert result.exit_code == 0, result.output
    assert "────" in result.output
