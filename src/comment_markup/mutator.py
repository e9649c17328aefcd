"""Selection-scoped text surgery for formatting commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from comment_markup.document import FormatKind
from comment_markup.parser import LIST_MARKER

logger = logging.getLogger(__name__)

BOLD_MARKER = "**"
ITALIC_MARKER = "*"


class SelectionError(ValueError):
    """Raised when selection offsets fall outside the text."""


@dataclass(frozen=True)
class FormatResult:
    """Text after a formatting command, plus where the caret goes."""

    new_text: str
    new_cursor_position: int


def apply_format(
    kind: FormatKind | str,
    text: str,
    selection_start: int,
    selection_end: int,
) -> FormatResult | None:
    """Apply a formatting command to the selected part of ``text``.

    Returns None when the selection is empty; nothing is formatted then.
    Raises SelectionError unless 0 <= selection_start <= selection_end <= len(text).
    """
    kind = FormatKind(kind)
    if not 0 <= selection_start <= selection_end <= len(text):
        msg = f"Invalid selection {selection_start}..{selection_end} for text of length {len(text)}"
        raise SelectionError(msg)

    if selection_start == selection_end:
        return None

    selected = text[selection_start:selection_end]
    if kind is FormatKind.BOLD:
        replacement = f"{BOLD_MARKER}{selected}{BOLD_MARKER}"
    elif kind is FormatKind.ITALIC:
        replacement = f"{ITALIC_MARKER}{selected}{ITALIC_MARKER}"
    else:
        replacement = "\n".join(f"{LIST_MARKER}{line}" for line in selected.split("\n"))

    logger.debug("Applying %s to %d..%d", kind, selection_start, selection_end)
    return FormatResult(
        new_text=text[:selection_start] + replacement + text[selection_end:],
        new_cursor_position=selection_end + len(replacement) - len(selected),
    )
