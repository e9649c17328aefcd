"""Editor state: raw text and its derived document, kept in step."""

from __future__ import annotations

from typing import TypeAlias

from comment_markup.document import FormatKind, FormattedContent
from comment_markup.mutator import apply_format
from comment_markup.parser import parse

Location: TypeAlias = tuple[int, int]


class EditorState:
    """Holds the raw text of a comment and the document parsed from it.

    Every change replaces the text and re-derives the document in one step,
    so the two are never observed out of sync.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._content = parse(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def content(self) -> FormattedContent:
        return self._content

    def set_text(self, text: str) -> FormattedContent:
        """Replace the text (free typing) and return the refreshed document."""
        self._text = text
        self._content = parse(text)
        return self._content

    def apply(self, kind: FormatKind | str, selection_start: int, selection_end: int) -> int | None:
        """Run a formatting command on the selection.

        Returns the new cursor offset, or None if the selection was empty and
        nothing changed.
        """
        result = apply_format(kind, self._text, selection_start, selection_end)
        if result is None:
            return None
        self.set_text(result.new_text)
        return result.new_cursor_position


def location_to_offset(text: str, location: Location, newline: str = "\n") -> int:
    """Convert a (row, column) location into a flat offset into ``text``."""
    lines = text.split(newline)
    row = max(0, min(location[0], len(lines) - 1))
    column = max(0, min(location[1], len(lines[row])))
    return sum(len(line) + len(newline) for line in lines[:row]) + column


def offset_to_location(text: str, offset: int, newline: str = "\n") -> Location:
    """Convert a flat offset into ``text`` into a (row, column) location."""
    offset = max(0, min(offset, len(text)))
    before = text[:offset].split(newline)
    return (len(before) - 1, len(before[-1]))
