"""Shared fixtures: sample comments and an isolated config directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


SAMPLE_COMMENT = """\
**Looks good overall**

A few notes:
- rename the helper
- add a test for *empty input*

*Thanks for the quick turnaround*"""


@pytest.fixture
def config_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory and return the config file path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    config_dir = tmp_path / "comment-markup"
    config_dir.mkdir()
    return config_dir / "config.toml"
