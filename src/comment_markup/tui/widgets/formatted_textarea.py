"""Comment editor widget: toolbar, text area and formatting shortcuts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.css.query import NoMatches
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static, TextArea

from comment_markup.config import (
    BOLD_BINDING_ID,
    DEFAULT_BOLD_KEY,
    DEFAULT_ITALIC_KEY,
    ITALIC_BINDING_ID,
)
from comment_markup.document import FormatKind
from comment_markup.editor import EditorState, location_to_offset, offset_to_location
from comment_markup.tui.widgets.formatting_toolbar import FormattingToolbar

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

    from comment_markup.document import FormattedContent

logger = logging.getLogger(__name__)

TIP = (
    "Tip: Use **bold**, *italic*, or select text and use toolbar buttons. "
    'Start lines with "- " for lists.'
)


class FormattedTextarea(Widget):
    """A TextArea with a formatting toolbar that keeps a parsed document in sync.

    Posts a Changed message carrying the raw text and its FormattedContent after
    every edit, whether typed or applied through a formatting command.
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding(DEFAULT_BOLD_KEY, "format('bold')", "Bold", show=True, id=BOLD_BINDING_ID),
        Binding(
            DEFAULT_ITALIC_KEY, "format('italic')", "Italic", show=True, id=ITALIC_BINDING_ID
        ),
    ]

    DEFAULT_CSS = """
    FormattedTextarea {
        height: auto;
        border: round $accent;
        padding: 0 1;
    }
    FormattedTextarea TextArea {
        height: auto;
        min-height: 5;
        max-height: 12;
    }
    FormattedTextarea #format-tip {
        text-style: dim;
    }
    """

    class Changed(Message):
        """Posted when the text, and so the document, has changed."""

        def __init__(self, text: str, content: FormattedContent) -> None:
            super().__init__()
            self.text = text
            self.content = content

    def __init__(
        self,
        text: str = "",
        *,
        placeholder: str = "",
        show_tip: bool = True,
        shortcuts: dict[FormatKind, str] | None = None,
        disabled: bool = False,
        id: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(id=id, disabled=disabled)
        self._state = EditorState(text)
        self._placeholder = placeholder
        self._show_tip = show_tip
        self._shortcuts = shortcuts or {
            FormatKind.BOLD: DEFAULT_BOLD_KEY,
            FormatKind.ITALIC: DEFAULT_ITALIC_KEY,
        }

    @property
    def text(self) -> str:
        """The raw comment text."""
        return self._state.text

    @property
    def content(self) -> FormattedContent:
        """The document parsed from the current text."""
        return self._state.content

    def compose(self) -> ComposeResult:
        yield FormattingToolbar(shortcuts=self._shortcuts)
        yield TextArea(self._state.text, placeholder=self._placeholder, id="comment-text")
        if self._show_tip:
            yield Static(TIP, id="format-tip", markup=False)

    def on_mount(self) -> None:
        """Focus the text area."""
        self.query_one(TextArea).focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Re-parse the full text after free typing."""
        event.stop()
        text = event.text_area.text
        # Formatting commands commit their text before the TextArea reports it.
        if text == self._state.text:
            return
        self._state.set_text(text)
        self._post_changed()

    def on_formatting_toolbar_format_requested(
        self, event: FormattingToolbar.FormatRequested
    ) -> None:
        """Apply the format chosen on the toolbar."""
        event.stop()
        self.action_format(event.kind)

    def action_format(self, kind: str) -> None:
        """Format the current selection, then put the caret after it."""
        text_area = self.query_one(TextArea)
        text = text_area.text
        if text != self._state.text:
            self._state.set_text(text)

        newline = text_area.document.newline
        start, end = sorted(text_area.selection)
        cursor = self._state.apply(
            FormatKind(kind),
            location_to_offset(text, start, newline),
            location_to_offset(text, end, newline),
        )
        if cursor is None:
            return

        text_area.load_text(self._state.text)
        self._post_changed()
        self.call_after_refresh(self._restore_caret, cursor)

    def _restore_caret(self, offset: int) -> None:
        """Refocus the text area with a collapsed selection at ``offset``."""
        try:
            text_area = self.query_one(TextArea)
        except NoMatches:
            logger.debug("Text area gone before caret could be restored")
            return
        text_area.focus()
        location = offset_to_location(text_area.text, offset, text_area.document.newline)
        text_area.move_cursor(location)

    def _post_changed(self) -> None:
        self.post_message(self.Changed(self._state.text, self._state.content))
