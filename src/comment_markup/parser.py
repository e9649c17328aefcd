"""Raw comment text to FormattedContent.

Handles: bold, italic (whole-line emphasis), "- " bullet lists.
Does NOT handle: nested emphasis, headings, links, escaped markers.
"""

from __future__ import annotations

import logging
import re

from comment_markup.document import (
    Block,
    Emphasis,
    FormattedContent,
    ListBlock,
    TextBlock,
)

logger = logging.getLogger(__name__)

LIST_MARKER = "- "

LINE_BREAK = re.compile(r"\r?\n")

BOLD_SPAN = re.compile(r"\*\*(.+?)\*\*")
ITALIC_SPAN = re.compile(r"\*(.+?)\*")


def parse(text: str) -> FormattedContent:
    """Convert raw comment text into a FormattedContent document."""
    blocks: list[Block] = []
    pending_items: list[str] = []

    for line in LINE_BREAK.split(text):
        stripped = line.strip()
        if stripped.startswith(LIST_MARKER):
            pending_items.append(stripped[len(LIST_MARKER) :])
            continue

        if pending_items:
            blocks.append(ListBlock(items=tuple(pending_items)))
            pending_items = []

        if stripped:
            blocks.append(_parse_text_line(line))

    if pending_items:
        blocks.append(ListBlock(items=tuple(pending_items)))

    logger.debug("Parsed %d chars into %d blocks", len(text), len(blocks))
    return FormattedContent(blocks=tuple(blocks))


def classify_emphasis(line: str) -> frozenset[Emphasis]:
    """Return the emphasis a single line carries.

    A line is italic when a single-asterisk span is left over once its bold
    spans are unwrapped, so "**hi**" is bold only while "**a** *b*" is both.
    """
    emphasis: set[Emphasis] = set()
    remainder = line
    if BOLD_SPAN.search(line):
        emphasis.add(Emphasis.BOLD)
        remainder = BOLD_SPAN.sub(r"\1", line)
    if ITALIC_SPAN.search(remainder):
        emphasis.add(Emphasis.ITALIC)
    return frozenset(emphasis)


def _parse_text_line(line: str) -> TextBlock:
    """Classify one line and strip its emphasis markers."""
    emphasis = classify_emphasis(line)
    content = line
    if Emphasis.ITALIC in emphasis:
        # Also covers bold+italic: span boundaries are lost on purpose.
        content = line.replace("*", "")
    elif Emphasis.BOLD in emphasis:
        content = line.replace("**", "")
    return TextBlock(content=content, emphasis=emphasis)
