"""Pytest configuration for UI backend tests."""
import sys
import pytest
from pathlib import Path
from dotenv import load_dotenv

# Add backend root to path so imports work
backend_root = Path(__file__).parent.parent
sys.path.insert(0, str(backend_root))

# Load env from project root
project_root = backend_root.parent.parent
load_dotenv(project_root / ".env")

from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.routers.scenes import get_board, get_launcher  # noqa: E402
from launcher import PromptLauncher  # noqa: E402
from scene_board import SceneBoard  # noqa: E402

LAUNCH_URL = "https://example.com/imagine"


class RecordingClipboard:
    """Clipboard stand-in that records what was copied."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.copied = []

    def copy(self, text: str) -> bool:
        self.copied.append(text)
        return self.succeed


class RecordingOpener:
    """Browser stand-in that records opened URLs."""

    def __init__(self):
        self.opened = []

    def open(self, url: str) -> None:
        self.opened.append(url)


@pytest.fixture
def launch_url():
    """URL the test launcher opens."""
    return LAUNCH_URL


@pytest.fixture
def board():
    """A fresh board with a small size ceiling."""
    return SceneBoard(max_file_size=200)


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def opener():
    return RecordingOpener()


@pytest.fixture
def client(board, clipboard, opener):
    """TestClient wired to the test board and a recording launcher."""
    app.dependency_overrides[get_board] = lambda: board
    app.dependency_overrides[get_launcher] = lambda: PromptLauncher(clipboard, opener, launch_url=LAUNCH_URL)
    yield TestClient(app)
    app.dependency_overrides.clear()
