import pytest

from termgrid.text.ansi import visible_length
from termgrid.text.truncate import TruncateMode
from termgrid.widgets.glyphs import BorderStyle
from termgrid.widgets.table import Alignment, Table, TableBuilder, TableColumn


def _fruit_table() -> TableBuilder:
    return TableBuilder().add_columns("Name", "Qty").add_row("apple", "3")


def test_bordered_table_layout() -> None:
    lines = _fruit_table().build().render(80)

    assert lines == [
        "┌───────┬─────┐",
        "│ Name  │ Qty │",
        "├───────┼─────┤",
        "│ apple │ 3   │",
        "└───────┴─────┘",
    ]


def test_alignment_per_column() -> None:
    table = (
        TableBuilder()
        .add_column("Name")
        .add_column("Qty", Alignment.RIGHT)
        .add_column("Tag", Alignment.CENTER)
        .add_row("apple", "3", "x")
        .build()
    )

    assert table.render()[3] == "│ apple │   3 │  x  │"


def test_borderless_table_joins_cells_with_two_spaces() -> None:
    lines = _fruit_table().border(BorderStyle.NONE).build().render()

    assert lines == ["Name   Qty", "apple  3  "]


def test_hidden_headers() -> None:
    lines = _fruit_table().hide_headers().build().render()

    assert lines == [
        "┌───────┬─────┐",
        "│ apple │ 3   │",
        "└───────┴─────┘",
    ]


def test_row_separators_only_between_rows() -> None:
    lines = _fruit_table().add_row("pear", "10").show_row_separators().build().render()

    assert len(lines) == 7
    assert lines[4] == "├───────┼─────┤"
    assert lines[-2] == "│ pear  │ 10  │"


@pytest.mark.parametrize("border", [BorderStyle.ROUNDED, BorderStyle.DOUBLED, BorderStyle.HEAVY])
def test_border_styles_change_corners(border: BorderStyle) -> None:
    lines = _fruit_table().border(border).build().render()

    assert lines[0][0] != "┌"
    assert len({visible_length(line) for line in lines}) == 1


def test_missing_cells_render_empty_and_extra_cells_are_ignored() -> None:
    table = TableBuilder().add_columns("A", "B").add_row("only").add_row("1", "2", "3").build()
    lines = table.render()

    assert lines[3] == "│ only │   │"
    assert "3" not in lines[4]


def test_shrinks_to_terminal_width_and_truncates() -> None:
    table = TableBuilder().add_columns("A", "B").add_row("x" * 30, "y").build()
    lines = table.render(20)

    assert all(visible_length(line) == 20 for line in lines)
    assert "xxxxxxxxx..." in lines[3]


def test_truncate_mode_per_column() -> None:
    table = (
        TableBuilder()
        .add_column("Path", truncate_mode=TruncateMode.START, max_width=8)
        .add_row("/very/long/path/file.txt")
        .build()
    )

    assert table.render()[3] == "│ ...e.txt │"


def test_expand_fills_terminal_width() -> None:
    lines = TableBuilder().add_columns("A", "B").expand().build().render(20)

    assert all(visible_length(line) == 20 for line in lines)


def test_no_shrink_keeps_natural_widths() -> None:
    table = TableBuilder().add_columns("A", "B").add_row("x" * 30, "y").shrink(False).build()

    assert visible_length(table.render(20)[0]) == 38


def test_header_and_border_colors() -> None:
    table = (
        TableBuilder()
        .add_column("Name", header_color="\x1b[1m")
        .add_row("apple")
        .border_color("\x1b[90m")
        .build()
    )
    lines = table.render()

    assert lines[0] == "\x1b[90m┌───────┐\x1b[0m"
    assert "\x1b[1mName\x1b[0m" in lines[1]
    assert visible_length(lines[1]) == visible_length(lines[0])


def test_styled_cells_are_measured_by_visible_width() -> None:
    table = TableBuilder().add_columns("N").add_row("\x1b[32mok\x1b[0m").build()
    lines = table.render()

    assert lines[3] == "│ \x1b[32mok\x1b[0m │"


def test_no_columns_renders_nothing() -> None:
    assert Table().render() == []


def test_builder_snapshots_are_independent() -> None:
    builder = _fruit_table()
    first = builder.build()
    builder.add_row("pear", "1")
    second = builder.build()

    assert len(first.rows) == 1
    assert len(second.rows) == 2


def test_column_object_can_be_added_directly() -> None:
    column = TableColumn(header="Id", alignment=Alignment.RIGHT, min_width=2)
    table = TableBuilder().add_column(column).build()

    assert table.columns == (column,)
    assert table.column_widths(80) == [2]
