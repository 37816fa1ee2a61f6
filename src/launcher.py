"""Hand a scene prompt off to the image/video generation site.

Launching is two steps: copy the final prompt to the system clipboard, then
open the generation site in a new browser tab so the user can paste it.
The tab is only opened when the copy succeeded.
"""

import logging
import platform
import subprocess
import webbrowser
from dataclasses import dataclass
from typing import Optional, Union

from config import get_launch_url
from exceptions import ClipboardError
from prompt_extraction import SceneRecord

logger = logging.getLogger(__name__)

# Linux clipboard tools tried in order (X11, X11, Wayland)
LINUX_CLIPBOARD_COMMANDS = [
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["wl-copy"],
]


def build_final_prompt(description: str, suffix: str = "") -> str:
    """
    Build the text that is copied for a scene.

    Args:
        description: Scene description
        suffix: Global style suffix; appended after a blank line when non-blank

    Returns:
        Final prompt text
    """
    suffix = (suffix or "").strip()
    if not suffix:
        return description
    return f"{description}\n\n{suffix}"


class SystemClipboard:
    """Clipboard access through the platform's command-line tools."""

    def copy(self, text: str) -> bool:
        """Copy text to the system clipboard. Returns False on failure."""
        system = platform.system()
        try:
            if system == "Windows":
                subprocess.run("clip", text=True, input=text, check=True)
            elif system == "Darwin":  # macOS
                subprocess.run("pbcopy", text=True, input=text, check=True)
            else:
                return self._copy_linux(text)
        except (subprocess.CalledProcessError, FileNotFoundError, OSError) as e:
            logger.warning(f"Could not copy to clipboard: {e}")
            return False
        logger.debug(f"Copied to clipboard: {text[:50]}...")
        return True

    def _copy_linux(self, text: str) -> bool:
        for cmd in LINUX_CLIPBOARD_COMMANDS:
            try:
                subprocess.run(cmd, text=True, input=text, check=True)
            except (subprocess.CalledProcessError, FileNotFoundError):
                continue
            logger.debug(f"Copied to clipboard with {cmd[0]}: {text[:50]}...")
            return True
        logger.warning("Could not copy to clipboard: no working xclip, xsel or wl-copy")
        return False


class BrowserOpener:
    """Opens URLs in a new tab of the default browser."""

    def open(self, url: str) -> None:
        webbrowser.open_new_tab(url)
        logger.debug(f"Opened {url} in browser")


@dataclass
class LaunchResult:
    """Result from launching a prompt.

    Attributes:
        prompt: Text that was copied to the clipboard
        url: URL that was opened
    """
    prompt: str
    url: str


class PromptLauncher:
    """
    Copies prompts and opens the generation site.

    Usage:
        launcher = PromptLauncher()
        launcher.launch(scene, suffix="cinematic, 35mm film")

    The clipboard and opener can be swapped for anything with the same
    copy(text) -> bool / open(url) methods (tests use fakes).
    """

    def __init__(self, clipboard=None, opener=None, launch_url: Optional[str] = None):
        self.clipboard = clipboard if clipboard is not None else SystemClipboard()
        self.opener = opener if opener is not None else BrowserOpener()
        self.launch_url = launch_url or get_launch_url()

    def launch(self, scene: Union[SceneRecord, str], suffix: str = "") -> LaunchResult:
        """
        Copy a scene's final prompt and open the generation site.

        Args:
            scene: SceneRecord or plain description text
            suffix: Global suffix appended after a blank line

        Returns:
            LaunchResult with the copied prompt and opened URL

        Raises:
            ClipboardError: If the copy failed (the site is not opened)
        """
        description = scene.description if isinstance(scene, SceneRecord) else scene
        prompt = build_final_prompt(description, suffix)

        if not self.clipboard.copy(prompt):
            logger.error("Clipboard write failed; not opening the generation site")
            raise ClipboardError("Could not copy the prompt to the clipboard")

        self.opener.open(self.launch_url)
        logger.info(f"Copied {len(prompt)} characters and opened {self.launch_url}")
        return LaunchResult(prompt=prompt, url=self.launch_url)
