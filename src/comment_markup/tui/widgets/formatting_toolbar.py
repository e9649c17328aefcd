"""Formatting toolbar: bold, italic and list buttons above the editor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button

from comment_markup.document import FormatKind

if TYPE_CHECKING:
    from textual.app import ComposeResult

_BUTTONS: list[tuple[FormatKind, str, str]] = [
    (FormatKind.BOLD, "B", "Bold"),
    (FormatKind.ITALIC, "I", "Italic"),
    (FormatKind.LIST, "•", "List"),
]


class FormattingToolbar(Horizontal):
    """A row of buttons that request formatting of the current selection."""

    DEFAULT_CSS = """
    FormattingToolbar {
        height: auto;
        border-bottom: solid $primary;
    }
    FormattingToolbar Button {
        min-width: 5;
        margin-right: 1;
    }
    """

    class FormatRequested(Message):
        """Posted when a toolbar button is pressed."""

        def __init__(self, kind: FormatKind) -> None:
            super().__init__()
            self.kind = kind

    def __init__(self, shortcuts: dict[FormatKind, str] | None = None) -> None:
        """Initialize with optional shortcut hints shown in the button tooltips."""
        super().__init__()
        self._shortcuts = shortcuts or {}

    def compose(self) -> ComposeResult:
        for kind, label, title in _BUTTONS:
            button = Button(label, id=f"format-{kind}")
            shortcut = self._shortcuts.get(kind)
            button.tooltip = f"{title} ({shortcut})" if shortcut else title
            yield button

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Translate a button press into a FormatRequested message."""
        event.stop()
        button_id = event.button.id or ""
        self.post_message(self.FormatRequested(FormatKind(button_id.removeprefix("format-"))))
