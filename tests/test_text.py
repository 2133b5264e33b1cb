import pytest

from gherkinpy.text import (
    LineIndex,
    TextRange,
    TextSize,
    format_tags,
    slice_text_range,
    strip_indent,
    trim_multiline,
    trim_ws,
)


def test_text_range_rejects_inverted_offsets() -> None:
    try:
        TextRange(5, 2)
    except ValueError:
        pass
    else:
        raise AssertionError("Expected ValueError for start > end")


def test_text_range_contains_range() -> None:
    left = TextRange.from_offsets(2, 5)
    right = TextRange.from_offsets(4, 9)
    outer = TextRange.from_offsets(2, 9)

    assert outer.as_tuple() == (2, 9)
    assert outer.contains_range(left)
    assert outer.contains_range(right)
    assert not left.contains_range(right)
    assert TextRange.empty_at(3).is_empty()
    assert left.len() == TextSize(3)


def test_slice_text_range() -> None:
    assert slice_text_range("Feature: F", TextRange.from_offsets(0, 7)) == "Feature"


@pytest.mark.parametrize(
    ("source", "offset", "expected"),
    [
        ("a\nb\nc", 0, (1, 1)),
        ("a\nb\nc", 2, (2, 1)),
        ("a\nb\nc", 4, (3, 1)),
        ("ab\r\ncd", 4, (2, 1)),
        ("ab\r\ncd", 5, (2, 2)),
        ("ab\rcd", 3, (2, 1)),
    ],
)
def test_line_index_line_col(source: str, offset: int, expected: tuple[int, int]) -> None:
    assert LineIndex(source).line_col(offset) == expected


def test_line_index_line_text_strips_terminators() -> None:
    index = LineIndex("first\r\nsecond\nthird")
    assert index.line_count == 3
    assert index.line_text(1) == "first"
    assert index.line_text(2) == "second"
    assert index.line_text(3) == "third"
    assert index.line_text(4) == ""


def test_trim_multiline_collapses_inner_blank_runs() -> None:
    assert trim_multiline("\n  line one\n\n\n  line two\n\n") == "line one\n\nline two"
    assert trim_multiline("   \n\t\n") == ""


def test_string_helpers() -> None:
    assert trim_ws(" \tvalue\r\n") == "value"
    assert strip_indent("       2", 5) == "  2"
    assert strip_indent("  x", 5) == "x"
    assert strip_indent("abc", 3) == "abc"
    assert format_tags(["a", "b"]) == "@a @b"
