"""Tests for mutator.py: apply_format() on selections."""

from __future__ import annotations

import pytest

from comment_markup.document import FormatKind
from comment_markup.mutator import FormatResult, SelectionError, apply_format


@pytest.mark.parametrize("kind", list(FormatKind))
def test_apply_format_empty_selection_is_noop(kind: FormatKind) -> None:
    """An empty selection formats nothing."""
    assert apply_format(kind, "hello", 2, 2) is None


def test_apply_format_bold() -> None:
    result = apply_format(FormatKind.BOLD, "hello world", 0, 5)
    assert result == FormatResult(new_text="**hello** world", new_cursor_position=9)


def test_apply_format_italic() -> None:
    result = apply_format(FormatKind.ITALIC, "hello world", 6, 11)
    assert result == FormatResult(new_text="hello *world*", new_cursor_position=13)


def test_apply_format_accepts_kind_name() -> None:
    """String kinds from toolbars and bindings are accepted."""
    assert apply_format("bold", "ab", 0, 2) == FormatResult("**ab**", 6)


def test_apply_format_unknown_kind_raises() -> None:
    with pytest.raises(ValueError, match="underline"):
        apply_format("underline", "ab", 0, 2)


def test_apply_format_list_prefixes_each_line() -> None:
    result = apply_format(FormatKind.LIST, "a\nb", 0, 3)
    assert result == FormatResult(new_text="- a\n- b", new_cursor_position=7)


def test_apply_format_list_prefixes_empty_lines() -> None:
    """Originally empty lines inside the selection get a marker too."""
    result = apply_format(FormatKind.LIST, "x\n\ny", 0, 4)
    assert result is not None
    assert result.new_text == "- x\n- \n- y"
    assert result.new_cursor_position == 10


def test_apply_format_list_mid_text() -> None:
    """Only the selected substring is rewritten; the cursor follows its end."""
    text = "intro\nfirst\nsecond\noutro"
    start = text.index("first")
    end = text.index("second") + len("second")
    result = apply_format(FormatKind.LIST, text, start, end)
    assert result is not None
    assert result.new_text == "intro\n- first\n- second\noutro"
    assert result.new_cursor_position == end + 4
    assert result.new_text[: result.new_cursor_position].endswith("- second")


@pytest.mark.parametrize(
    ("start", "end"),
    [(-1, 2), (3, 2), (0, 6)],
)
def test_apply_format_invalid_selection_raises(start: int, end: int) -> None:
    """Offsets outside the text are rejected."""
    with pytest.raises(SelectionError):
        apply_format(FormatKind.BOLD, "hello", start, end)
