"""Health and status endpoints."""

from fastapi import APIRouter, Depends

from app.routers.scenes import get_board
from scene_board import SceneBoard

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "promptflow-api"}


@router.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "PromptFlow API",
        "docs": "/docs",
        "health": "/health",
        "scenes": "/api/scenes"
    }


@router.get("/api/status")
async def board_status(board: SceneBoard = Depends(get_board)):
    """Report how many scenes are loaded."""
    return {
        "scene_count": len(board),
        "status": "loaded" if len(board) > 0 else "empty"
    }
