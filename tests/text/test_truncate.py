import pytest

from termgrid.text.ansi import visible_length
from termgrid.text.truncate import TruncateMode, truncate


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (TruncateMode.END, "abc..."),
        (TruncateMode.START, "...fgh"),
        (TruncateMode.MIDDLE, "ab...h"),
    ],
)
def test_ellipsis_placement(mode: TruncateMode, expected: str) -> None:
    assert truncate("abcdefgh", 6, mode) == expected


def test_middle_with_no_room_for_a_tail() -> None:
    assert truncate("abcdefgh", 4, TruncateMode.MIDDLE) == "a..."


def test_middle_splits_evenly_when_possible() -> None:
    assert truncate("abcdefghij", 7, TruncateMode.MIDDLE) == "ab...ij"


@pytest.mark.parametrize(("width", "expected"), [(3, "..."), (2, ".."), (1, "."), (0, ""), (-2, "")])
def test_tiny_widths_produce_dots(width: int, expected: str) -> None:
    assert truncate("abcdefgh", width) == expected


def test_fitting_text_keeps_its_escapes() -> None:
    styled = "\x1b[31mabc\x1b[0m"

    assert truncate(styled, 4) is styled
    assert truncate(styled, 10) == styled


def test_truncated_text_drops_escapes() -> None:
    result = truncate("\x1b[31mabcdefgh\x1b[0m", 6)

    assert result == "abc..."
    assert "\x1b" not in result


@pytest.mark.parametrize("text", [None, ""])
def test_empty_input(text) -> None:
    assert truncate(text, 5) == ""


@pytest.mark.parametrize("mode", list(TruncateMode))
@pytest.mark.parametrize("width", range(0, 12))
def test_result_never_exceeds_width(mode: TruncateMode, width: int) -> None:
    assert visible_length(truncate("the quick brown fox", width, mode)) <= max(0, width)
