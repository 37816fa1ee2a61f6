"""Configuration for the PromptFlow backend."""

import sys
from pathlib import Path

# Add src to path so the backend runs from ui/backend without an install
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent / "src"))
from config import get_launch_url, get_max_file_size, get_prompt_suffix


class Settings:
    """Application settings."""

    # Upload settings
    MAX_FILE_SIZE = get_max_file_size()  # bytes per uploaded file

    # Launch settings
    LAUNCH_URL = get_launch_url()
    PROMPT_SUFFIX = get_prompt_suffix()

    # Frontend dev servers allowed by CORS
    CORS_ORIGINS = ["http://localhost:5173", "http://localhost:5174"]


# Global settings instance
settings = Settings()
