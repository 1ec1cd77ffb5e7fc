import pytest

from termgrid.text.ansi import (
    ANSI_RESET,
    SegmentKind,
    create_link,
    hyperlink_target,
    is_reset,
    scan_segments,
    strip_escapes,
    style,
    visible_length,
)

RED = "\x1b[31m"
LINK_OPEN = "\x1b]8;;https://example.com\x1b\\"
LINK_CLOSE = "\x1b]8;;\x1b\\"


def test_scan_segments_partitions_input_in_order() -> None:
    text = f"a{RED}bc{ANSI_RESET}d"
    segments = scan_segments(text)

    assert [segment.kind for segment in segments] == [
        SegmentKind.VISIBLE,
        SegmentKind.ESCAPE,
        SegmentKind.VISIBLE,
        SegmentKind.ESCAPE,
        SegmentKind.VISIBLE,
    ]
    assert "".join(segment.text for segment in segments) == text


def test_scan_segments_recognises_hyperlinks_with_either_terminator() -> None:
    bel_link = "\x1b]8;;https://example.com\x07"
    segments = scan_segments(f"{LINK_OPEN}x{LINK_CLOSE}{bel_link}")

    escapes = [segment.text for segment in segments if segment.is_escape]
    assert escapes == [LINK_OPEN, LINK_CLOSE, bel_link]


@pytest.mark.parametrize("text", [None, ""])
def test_scan_segments_empty_input(text) -> None:
    assert scan_segments(text) == []


@pytest.mark.parametrize(
    "text",
    [
        "\x1b[31",
        "abc\x1b[",
        "\x1b]8;;https://example.com",
        "x\x1b[1;2",
    ],
)
def test_unterminated_sequences_are_visible_text(text: str) -> None:
    segments = scan_segments(text)

    assert all(segment.kind is SegmentKind.VISIBLE for segment in segments)
    assert "".join(segment.text for segment in segments) == text
    assert visible_length(text) == len(text)


def test_strip_escapes_removes_codes_and_links() -> None:
    text = f"{RED}red{ANSI_RESET} {LINK_OPEN}link{LINK_CLOSE}"

    assert strip_escapes(text) == "red link"
    assert strip_escapes(strip_escapes(text)) == "red link"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (None, 0),
        ("", 0),
        ("plain", 5),
        (f"{RED}red{ANSI_RESET}", 3),
        ("\x1b[1;38;5;200mbold\x1b[m", 4),
        (create_link("docs", "https://example.com"), 4),
    ],
)
def test_visible_length(text, expected: int) -> None:
    assert visible_length(text) == expected


def test_is_reset_accepts_both_forms() -> None:
    assert is_reset("\x1b[0m")
    assert is_reset("\x1b[m")
    assert not is_reset(RED)


def test_hyperlink_target() -> None:
    assert hyperlink_target(LINK_OPEN) == "https://example.com"
    assert hyperlink_target("\x1b]8;;https://a.test\x07") == "https://a.test"
    assert hyperlink_target(LINK_CLOSE) == ""
    assert hyperlink_target(RED) is None


def test_create_link_round_trips_through_scanner() -> None:
    text = create_link("docs", "https://example.com")

    assert text == f"{LINK_OPEN}docs{LINK_CLOSE}"
    assert strip_escapes(text) == "docs"


def test_style_wraps_with_reset_and_ignores_empty_code() -> None:
    assert style("x", RED) == f"{RED}x{ANSI_RESET}"
    assert style("x", None) == "x"
    assert style("x", "") == "x"
