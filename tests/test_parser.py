"""Tests for parser.py: line classification, list grouping and emphasis."""

from __future__ import annotations

import pytest

from comment_markup.document import Emphasis, FormatKind, FormattedContent, ListBlock, TextBlock
from comment_markup.mutator import apply_format
from comment_markup.parser import classify_emphasis, parse
from tests.conftest import SAMPLE_COMMENT

BOLD = frozenset({Emphasis.BOLD})
ITALIC = frozenset({Emphasis.ITALIC})
BOTH = frozenset({Emphasis.BOLD, Emphasis.ITALIC})


@pytest.mark.parametrize("text", ["", "\n", "   \n\t\n", "\n\n\n"])
def test_parse_blank_input_yields_empty_document(text: str) -> None:
    """Empty or whitespace-only text parses to a version-1 document without blocks."""
    result = parse(text)
    assert result == FormattedContent(blocks=())
    assert result.version == 1
    assert result.is_empty


def test_parse_groups_consecutive_list_lines() -> None:
    """A run of list lines becomes one ListBlock; the next line flushes it."""
    result = parse("- a\n- b\nc")
    assert result.blocks == (
        ListBlock(items=("a", "b")),
        TextBlock(content="c"),
    )


def test_parse_skips_blank_lines() -> None:
    """Blank lines separate blocks but never become one."""
    result = parse("a\n\nb")
    assert result.blocks == (TextBlock(content="a"), TextBlock(content="b"))


def test_parse_blank_line_splits_lists() -> None:
    """A blank line between list lines closes the first list."""
    result = parse("- a\n\n- b")
    assert result.blocks == (ListBlock(items=("a",)), ListBlock(items=("b",)))


def test_parse_flushes_trailing_list() -> None:
    """A list at the end of the text is still emitted."""
    result = parse("intro\n- one\n- two")
    assert result.blocks == (TextBlock(content="intro"), ListBlock(items=("one", "two")))


def test_parse_list_marker_detected_after_trimming() -> None:
    """Indented list markers count; only the outer whitespace and marker are removed."""
    result = parse("   - indented  \n-  spaced")
    assert result.blocks == (ListBlock(items=("indented", " spaced")),)


def test_parse_dash_without_space_is_text() -> None:
    """A dash not followed by a space is not a list marker."""
    result = parse("-not a list\n-")
    assert result.blocks == (TextBlock(content="-not a list"), TextBlock(content="-"))


def test_parse_list_line_keeps_emphasis_markers() -> None:
    """List detection wins: markers inside list items are left alone."""
    result = parse("- **bold** item\n- *it*")
    assert result.blocks == (ListBlock(items=("**bold** item", "*it*")),)


def test_parse_bold_only() -> None:
    result = parse("**hi**")
    assert result.blocks == (TextBlock(content="hi", emphasis=BOLD),)


def test_parse_italic_only() -> None:
    result = parse("*hi*")
    assert result.blocks == (TextBlock(content="hi", emphasis=ITALIC),)


def test_parse_mixed_bold_and_italic_collapses_markers() -> None:
    """Current contract: a line with both spans gets both styles and loses every asterisk.

    Span boundaries are not kept; the whole line is treated as bold and italic.
    """
    result = parse("**a** and *b*")
    assert result.blocks == (TextBlock(content="a and b", emphasis=BOTH),)


def test_parse_triple_asterisks_indistinguishable_from_mixed_spans() -> None:
    """Triple asterisks collapse the same way as separate bold and italic spans."""
    assert parse("***ab***").blocks == (TextBlock(content="ab", emphasis=BOTH),)
    assert parse("**a** *b*").blocks == (TextBlock(content="a b", emphasis=BOTH),)


def test_parse_bold_keeps_surrounding_text() -> None:
    result = parse("this is **very** important")
    assert result.blocks == (TextBlock(content="this is very important", emphasis=BOLD),)


def test_parse_plain_line_is_unchanged() -> None:
    """Lines without markers keep their whitespace untouched."""
    result = parse("  indented text  ")
    assert result.blocks == (TextBlock(content="  indented text  "),)


@pytest.mark.parametrize("line", ["**unterminated", "a * b", "**", "*"])
def test_parse_unbalanced_markers_stay_literal(line: str) -> None:
    """Markers that do not close a span are kept as literal characters."""
    result = parse(line)
    assert result.blocks == (TextBlock(content=line),)


def test_parse_markers_do_not_pair_across_lines() -> None:
    """An asterisk on one line never closes a span opened on another."""
    result = parse("*start\nend*")
    assert result.blocks == (TextBlock(content="*start"), TextBlock(content="end*"))


def test_parse_emphasis_is_line_scoped() -> None:
    """Each line gets its own emphasis, even within a paragraph."""
    result = parse("**first**\nsecond\n*third*")
    assert result.blocks == (
        TextBlock(content="first", emphasis=BOLD),
        TextBlock(content="second"),
        TextBlock(content="third", emphasis=ITALIC),
    )


def test_parse_repeated_calls_are_independent() -> None:
    """Matching carries no state from one line or call to the next."""
    assert parse("**a** b\n**c** d") == parse("**a** b\n**c** d")
    blocks = parse("**a** b\n**c** d").blocks
    assert blocks == (
        TextBlock(content="a b", emphasis=BOLD),
        TextBlock(content="c d", emphasis=BOLD),
    )


def test_parse_handles_windows_line_endings() -> None:
    result = parse("- a\r\n- b\r\nc")
    assert result.blocks == (ListBlock(items=("a", "b")), TextBlock(content="c"))


@pytest.mark.parametrize("text", ["a\x0cb", "a\x0bb", "a\x85b", "a\u2028b", "a\u2029b"])
def test_parse_splits_only_on_newline(text: str) -> None:
    """Other Unicode line separators stay inside the line."""
    assert parse(text).blocks == (TextBlock(content=text),)


@pytest.mark.parametrize("selected", ["a\nb", "a\u2028b\nc", "x\x0cy"])
def test_list_formatted_text_reparses_as_one_list(selected: str) -> None:
    """Lines prefixed by the list command come back as a single ListBlock."""
    result = apply_format(FormatKind.LIST, selected, 0, len(selected))
    assert result is not None
    assert parse(result.new_text).blocks == (ListBlock(items=tuple(selected.split("\n"))),)


def test_parse_sample_comment() -> None:
    result = parse(SAMPLE_COMMENT)
    assert result.blocks == (
        TextBlock(content="Looks good overall", emphasis=BOLD),
        TextBlock(content="A few notes:"),
        ListBlock(items=("rename the helper", "add a test for *empty input*")),
        TextBlock(content="Thanks for the quick turnaround", emphasis=ITALIC),
    )


@pytest.mark.parametrize("text", ["**hi**", "*hi*", "**a** and *b*", "say **it** loud"])
def test_stripped_content_reparses_unchanged(text: str) -> None:
    """Re-parsing stripped content strips nothing more."""
    (block,) = parse(text).blocks
    assert isinstance(block, TextBlock)
    assert "*" not in block.content
    assert parse(block.content).blocks == (TextBlock(content=block.content),)


def test_classify_emphasis() -> None:
    assert classify_emphasis("plain") == frozenset()
    assert classify_emphasis("**b**") == BOLD
    assert classify_emphasis("*i*") == ITALIC
    assert classify_emphasis("**b** *i*") == BOTH
