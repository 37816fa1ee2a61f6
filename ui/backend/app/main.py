"""PromptFlow scene organizer API.

Run with: cd ui/backend && uvicorn app.main:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import health, scenes
from logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging once the server starts."""
    setup_logging("promptflow.api")
    yield


app = FastAPI(
    title="PromptFlow API",
    description="Extracts scene prompts from AI assistant output and launches them",
    version="0.1.0",
    lifespan=lifespan
)

# CORS middleware for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health.router)
app.include_router(scenes.router)
