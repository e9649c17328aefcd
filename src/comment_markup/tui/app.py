"""Textual App — comment editor with a live formatted preview."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from comment_markup.config import EditorConfig
from comment_markup.document import FormatKind
from comment_markup.parser import parse
from comment_markup.tui.help_screen import HelpScreen
from comment_markup.tui.widgets.formatted_display import FormattedTextDisplay
from comment_markup.tui.widgets.formatted_textarea import FormattedTextarea

if TYPE_CHECKING:
    from textual.binding import BindingType


class CommentApp(App[str | None]):
    """Write a comment with lightweight markup and watch it render.

    Exits with the comment text on submit, or None when quit.
    """

    TITLE = "comment-markup"

    CSS = """
    #editor {
        height: auto;
    }
    #preview-title {
        text-style: bold;
        padding: 1 1 0 1;
    }
    #preview-pane {
        height: 1fr;
        border-top: solid $primary;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+s", "submit", "Submit", show=True),
        Binding("f1", "show_help", "Help", show=True),
        Binding("escape", "quit", "Quit", show=True),
    ]

    def __init__(self, text: str = "", config: EditorConfig | None = None) -> None:
        super().__init__()
        self._initial_text = text
        self._config = config or EditorConfig()

    def compose(self) -> ComposeResult:
        """Stack the editor above the preview."""
        yield Header()
        yield FormattedTextarea(
            self._initial_text,
            placeholder=self._config.placeholder,
            show_tip=self._config.show_tip,
            shortcuts={
                FormatKind.BOLD: self._config.bold_key,
                FormatKind.ITALIC: self._config.italic_key,
            },
            id="editor",
        )
        yield Static("Preview", id="preview-title")
        with VerticalScroll(id="preview-pane"):
            yield FormattedTextDisplay(
                self._initial_text, parse(self._initial_text), id="preview"
            )
        yield Footer()

    def on_mount(self) -> None:
        """Bind the format shortcuts to the configured keys."""
        self.set_keymap(self._config.keymap())

    def on_formatted_textarea_changed(self, event: FormattedTextarea.Changed) -> None:
        """Keep the preview in step with the editor."""
        self.query_one(FormattedTextDisplay).show(event.text, event.content)

    def action_submit(self) -> None:
        """Exit with the comment if non-empty."""
        text = self.query_one(FormattedTextarea).text
        if text.strip():
            self.exit(text)
        else:
            self.notify("Cannot submit an empty comment.")

    def action_show_help(self) -> None:
        """Show the help overlay."""
        self.push_screen(HelpScreen(self._config))
