"""Help screen — modal overlay showing keybindings and markup syntax."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rich.markup import escape
from textual.containers import Center, Middle
from textual.screen import ModalScreen
from textual.widgets import Static

from comment_markup.config import EditorConfig

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

_HELP = """\
[bold]Editor Keybindings[/bold]

  [bold]{bold_key:<10}[/bold] Bold selection
  [bold]{italic_key:<10}[/bold] Italic selection
  [bold]Ctrl+s[/bold]     Submit comment
  [bold]Escape[/bold]     Quit without submitting
  [bold]Ctrl+q[/bold]     Quit without submitting
  [bold]F1[/bold]         This help

[bold]Markup[/bold]

  {bold_sample}   bold line
  {italic_sample}     italic line
  {list_sample}   list item

Press [bold]F1[/bold] or [bold]Escape[/bold] to dismiss.
"""


def build_help_text(config: EditorConfig) -> str:
    """Render the help text for the configured shortcuts."""
    return _HELP.format(
        bold_key=escape(config.bold_key.capitalize()),
        italic_key=escape(config.italic_key.capitalize()),
        bold_sample=escape("**text**"),
        italic_sample=escape("*text*"),
        list_sample=escape('"- text"'),
    )


class HelpScreen(ModalScreen[None]):
    """Modal help overlay showing all keybindings."""

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("f1", "dismiss_help", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    HelpScreen > Center > Middle > Static {
        width: 50;
        padding: 2 4;
        background: $surface;
        border: tall $primary;
    }
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        super().__init__()
        self._config = config or EditorConfig()

    def compose(self) -> ComposeResult:
        """Create the help content."""
        with Center(), Middle():
            yield Static(build_help_text(self._config), markup=True, id="help-text")

    def action_dismiss_help(self) -> None:
        """Dismiss the help screen."""
        self.dismiss(None)
