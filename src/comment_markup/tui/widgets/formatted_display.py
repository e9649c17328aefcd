"""Read-only display of a formatted comment.

Renders FormattedContent to Rich Text: bullet lists and whole-line bold/italic.
Falls back to the raw text when there is no document to show.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.widgets import Static

from comment_markup.document import ListBlock, TextBlock

if TYPE_CHECKING:
    from comment_markup.document import FormattedContent

BULLET = "•"


def render_document(text: str, content: FormattedContent | None = None) -> Text:
    """Render a document, or ``text`` verbatim if the document has no blocks."""
    if content is None or content.is_empty:
        return Text(text)

    lines: list[Text] = []
    for block in content.blocks:
        if isinstance(block, ListBlock):
            lines.extend(Text(f"{BULLET} {item}") for item in block.items)
        elif isinstance(block, TextBlock) and block.content:
            lines.append(Text(block.content, style=_block_style(block)))

    return Text("\n").join(lines)


def _block_style(block: TextBlock) -> str:
    styles: list[str] = []
    if block.bold:
        styles.append("bold")
    if block.italic:
        styles.append("italic")
    return " ".join(styles)


class FormattedTextDisplay(Static):
    """Shows a comment the way its author formatted it."""

    DEFAULT_CSS = """
    FormattedTextDisplay {
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        text: str = "",
        content: FormattedContent | None = None,
        *,
        id: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(render_document(text, content), id=id)
        self.comment_text = text
        self.comment_content = content

    def show(self, text: str, content: FormattedContent | None) -> None:
        """Replace the displayed comment."""
        self.comment_text = text
        self.comment_content = content
        self.update(render_document(text, content))
