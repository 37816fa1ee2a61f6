"""
Public API for PromptFlow.

This module provides the official interface for external applications
(the local web backend, CLI tools, notebooks) to turn AI assistant output
into scene prompts and hand them off to the generation site.

Configuration comes from environment variables (.env file), see config.py.

Example usage:
    from api import extract_scenes, extract_scenes_from_files, launch_scene

    scenes = extract_scenes(pasted_text)
    scenes += extract_scenes_from_files(["prompts/episode1.md"])

    result = launch_scene(scenes[0], suffix="cinematic lighting")
    print(f"Copied {len(result.prompt)} characters, opened {result.url}")
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from config import get_prompt_suffix
from exceptions import ClipboardError, PromptFlowError
from launcher import LaunchResult, PromptLauncher, build_final_prompt
from prompt_extraction import PASTED_SOURCE_LABEL, SceneRecord, extract
from scene_board import SceneBoard

logger = logging.getLogger(__name__)

# Errors crossing the API boundary are PromptFlowErrors; the original
# exception is preserved as __cause__ for debugging.
APIError = PromptFlowError


def extract_scenes(text: str, source: str = PASTED_SOURCE_LABEL) -> List[SceneRecord]:
    """
    Extract scene prompts from raw text.

    Args:
        text: Assistant output (JSON, headered prose, or plain paragraphs)
        source: Label stored on each scene (default: "Pasted Content")

    Returns:
        Scenes in document order (empty if nothing usable was found)
    """
    return extract(text, source)


def extract_scenes_from_files(
    paths: Iterable[Union[str, Path]],
    max_workers: int = 1,
    max_file_size: Optional[int] = None
) -> List[SceneRecord]:
    """
    Extract scenes from files, concatenated in the order given.

    Oversized and unreadable files are skipped (logged as warnings).

    Args:
        paths: Text files to read
        max_workers: Parallel workers for large batches
        max_file_size: Size ceiling in bytes (default: PROMPTFLOW_MAX_FILE_SIZE)

    Returns:
        Scenes from all files

    Raises:
        APIError: If PROMPTFLOW_MAX_FILE_SIZE is invalid (ConfigurationError)
    """
    board = SceneBoard(max_file_size=max_file_size)
    return board.add_files(paths, max_workers=max_workers)


def build_prompt(scene: Union[SceneRecord, str], suffix: Optional[str] = None) -> str:
    """
    Build the final prompt text for a scene.

    Args:
        scene: SceneRecord or description text
        suffix: Global suffix (default: PROMPTFLOW_PROMPT_SUFFIX)
    """
    description = scene.description if isinstance(scene, SceneRecord) else scene
    if suffix is None:
        suffix = get_prompt_suffix()
    return build_final_prompt(description, suffix)


def launch_scene(
    scene: Union[SceneRecord, str],
    suffix: Optional[str] = None,
    launcher: Optional[PromptLauncher] = None
) -> LaunchResult:
    """
    Copy a scene's prompt to the clipboard and open the generation site.

    Args:
        scene: SceneRecord or description text
        suffix: Global suffix (default: PROMPTFLOW_PROMPT_SUFFIX)
        launcher: Launcher to use (default: system clipboard + browser)

    Returns:
        LaunchResult with the copied prompt and opened URL

    Raises:
        ClipboardError: If the clipboard write failed (nothing was opened)
        APIError: If opening the browser failed
    """
    if suffix is None:
        suffix = get_prompt_suffix()
    launcher = launcher or PromptLauncher()

    try:
        return launcher.launch(scene, suffix=suffix)
    except ClipboardError:
        raise
    except Exception as e:
        logger.error(f"Failed to launch scene: {e}")
        raise APIError(f"Failed to launch scene: {e}") from e
