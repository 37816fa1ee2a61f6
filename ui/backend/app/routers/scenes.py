"""Scene list, upload, and launch endpoints."""

import logging
from pathlib import PurePath
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel

from app.config import settings
from exceptions import ClipboardError, FileTooLargeError
from launcher import PromptLauncher, build_final_prompt
from prompt_extraction import PASTED_SOURCE_LABEL
from scene_board import SceneBoard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/scenes", tags=["scenes"])

# One board per backend process; the UI shows a single running list
_board: Optional[SceneBoard] = None


def get_board() -> SceneBoard:
    """Return the process-wide scene board, creating it on first use."""
    global _board
    if _board is None:
        _board = SceneBoard(max_file_size=settings.MAX_FILE_SIZE)
    return _board


def get_launcher() -> PromptLauncher:
    return PromptLauncher(launch_url=settings.LAUNCH_URL)


def source_label(filename: str | None) -> str:
    """
    Turn an uploaded filename into a source label.

    Browsers send folder uploads as "folder/name.txt"; only the base name is kept.
    """
    if not filename:
        return "unnamed"
    return PurePath(filename.replace("\\", "/")).name or "unnamed"


class PasteRequest(BaseModel):
    """Request body for pasted assistant output."""

    text: str
    source: Optional[str] = None


class LaunchRequest(BaseModel):
    """Request body for launching a scene."""

    suffix: Optional[str] = None


def _scene_list(board: SceneBoard) -> dict:
    scenes = board.scenes
    return {"count": len(scenes), "scenes": [s.model_dump() for s in scenes]}


@router.get("")
async def list_scenes(board: SceneBoard = Depends(get_board)):
    """
    List every scene on the board in arrival order.

    Returns:
        count and scenes
    """
    return _scene_list(board)


@router.delete("")
async def clear_scenes(board: SceneBoard = Depends(get_board)):
    """Remove every scene from the board."""
    removed = board.clear()
    return {"success": True, "removed": removed}


@router.post("/paste")
async def paste_text(request: PasteRequest, board: SceneBoard = Depends(get_board)):
    """
    Extract scenes from pasted text.

    Args:
        request: Pasted text and an optional source label

    Returns:
        Scenes added by this paste plus the updated total
    """
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Pasted text is empty")

    added = board.add_text(request.text, request.source or PASTED_SOURCE_LABEL)
    return {
        "added": [s.model_dump() for s in added],
        "count": len(board),
    }


@router.post("/upload")
async def upload_files(
    files: list[UploadFile] = File(...),
    board: SceneBoard = Depends(get_board),
):
    """
    Extract scenes from uploaded text files, in upload order.

    Files over the size ceiling are reported in "skipped" rather than
    failing the whole request.
    """
    added = []
    skipped = []
    for upload in files:
        name = source_label(upload.filename)
        content = await upload.read()
        try:
            added.extend(board.add_bytes(content, name))
        except FileTooLargeError as e:
            logger.warning(f"Skipping oversized upload: {e}")
            skipped.append({"filename": name, "size": e.size, "limit": e.limit})

    return {
        "added": [s.model_dump() for s in added],
        "skipped": skipped,
        "count": len(board),
    }


@router.get("/{scene_id}/prompt")
async def get_prompt(
    scene_id: str,
    suffix: Optional[str] = None,
    board: SceneBoard = Depends(get_board),
):
    """
    Preview the final prompt for a scene without launching it.

    Args:
        scene_id: Scene identifier
        suffix: Global suffix (default: PROMPTFLOW_PROMPT_SUFFIX)
    """
    scene = board.get(scene_id)
    if scene is None:
        raise HTTPException(status_code=404, detail=f"Scene not found: {scene_id}")

    prompt = build_final_prompt(scene.description, settings.PROMPT_SUFFIX if suffix is None else suffix)
    return {"id": scene.id, "prompt": prompt}


@router.post("/{scene_id}/launch")
async def launch_scene(
    scene_id: str,
    request: Optional[LaunchRequest] = None,
    board: SceneBoard = Depends(get_board),
    launcher: PromptLauncher = Depends(get_launcher),
):
    """
    Copy a scene's final prompt to the clipboard and open the generation site.

    Returns:
        The copied prompt and the opened URL
    """
    scene = board.get(scene_id)
    if scene is None:
        raise HTTPException(status_code=404, detail=f"Scene not found: {scene_id}")

    suffix = request.suffix if request and request.suffix is not None else settings.PROMPT_SUFFIX
    try:
        result = launcher.launch(scene, suffix=suffix)
    except ClipboardError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"success": True, "id": scene.id, "prompt": result.prompt, "url": result.url}
