"""Editor configuration: load and validate config.toml."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

BOLD_BINDING_ID = "comment_markup.bold"
ITALIC_BINDING_ID = "comment_markup.italic"

DEFAULT_BOLD_KEY = "ctrl+b"
# Terminals report ctrl+i as tab, so italic gets its own combo.
DEFAULT_ITALIC_KEY = "ctrl+t"
DEFAULT_PLACEHOLDER = "Write a comment…"


class ConfigError(Exception):
    """Raised when config.toml is malformed or holds values of the wrong type."""


@dataclass
class EditorConfig:
    """Settings for the comment editor."""

    bold_key: str = DEFAULT_BOLD_KEY
    italic_key: str = DEFAULT_ITALIC_KEY
    placeholder: str = DEFAULT_PLACEHOLDER
    show_tip: bool = True

    def keymap(self) -> dict[str, str]:
        """Return a Textual keymap binding the format shortcuts to their keys."""
        return {BOLD_BINDING_ID: self.bold_key, ITALIC_BINDING_ID: self.italic_key}


def get_config_path() -> Path:
    """Return the path to config.toml, respecting XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "comment-markup" / "config.toml"


def load_config(path: Path) -> EditorConfig:
    """Load and validate the editor configuration from a TOML file.

    Returns the defaults if the file does not exist.
    Raises ConfigError on parse errors or values of the wrong type.
    """
    if not path.exists():
        return EditorConfig()

    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e

    keys = data.get("keys", {})
    editor = data.get("editor", {})
    config = EditorConfig()
    for section, name, attr, expected in (
        (keys, "bold", "bold_key", str),
        (keys, "italic", "italic_key", str),
        (editor, "placeholder", "placeholder", str),
        (editor, "show_tip", "show_tip", bool),
    ):
        if name not in section:
            continue
        value = section[name]
        if not isinstance(value, expected):
            msg = f"'{name}' in {path} must be a {expected.__name__}, got {value!r}"
            raise ConfigError(msg)
        setattr(config, attr, value)
    return config
