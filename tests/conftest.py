"""
Shared pytest fixtures for PromptFlow tests.
"""

import logging

import pytest
from pathlib import Path


# Project root
PROJECT_ROOT = Path(__file__).parent.parent

SCENE_HEADER_TEXT = (
    "Scene 1: A cat sits.\n\n"
    "Scene 2: A dog runs far away into the misty forest."
)

JSON_SCENES_TEXT = """Here are your scenes:

```json
[
  {"scene_number": 1, "title": "Neon Chase", "description": "A red car speeds down a neon highway at night.", "visuals": {"subject": "Red sports car"}},
  {"scene_number": 2, "title": "Quiet Dawn", "description": "Mist rolls over a silent lake as the sun rises."}
]
```
"""

CHATTY_TEXT = (
    "Got it! Here are your prompts:\n\n"
    "Title\n\n"
    "Scene 2: A long enough descriptive prompt about a forest at dawn with birds singing loudly."
)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def scene_header_text():
    """Two prompts introduced by "Scene N:" headers."""
    return SCENE_HEADER_TEXT


@pytest.fixture
def json_scenes_text():
    """A fenced JSON array of two scenes surrounded by chatter."""
    return JSON_SCENES_TEXT


@pytest.fixture
def chatty_text():
    """Assistant chatter, a bare title, then one headed prompt."""
    return CHATTY_TEXT


class FakeClipboard:
    """Records copied text instead of touching the system clipboard."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.copied = []

    def copy(self, text: str) -> bool:
        self.copied.append(text)
        return self.succeed


class FakeOpener:
    """Records opened URLs instead of launching a browser."""

    def __init__(self):
        self.opened = []

    def open(self, url: str) -> None:
        self.opened.append(url)


@pytest.fixture
def fake_clipboard():
    """Clipboard that always succeeds."""
    return FakeClipboard()


@pytest.fixture
def failing_clipboard():
    """Clipboard whose copy always fails."""
    return FakeClipboard(succeed=False)


@pytest.fixture
def fake_opener():
    """Browser opener that only records URLs."""
    return FakeOpener()


@pytest.fixture
def prompt_files(tmp_path):
    """Write a small folder of prompt files and return the directory."""
    (tmp_path / "a_headers.md").write_text(SCENE_HEADER_TEXT, encoding="utf-8")
    (tmp_path / "b_scenes.json").write_text(JSON_SCENES_TEXT, encoding="utf-8")
    (tmp_path / ".hidden.txt").write_text("Scene 9: This file should never be read.", encoding="utf-8")
    return tmp_path


@pytest.fixture
def reset_logging():
    """Drop handlers added by setup_logging() and restore the root level."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in [h for h in root.handlers if h not in handlers]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)
