"""Centralized configuration for PromptFlow.

This module provides:
- PROJECT_ROOT and SRC_DIR paths
- Environment variable access with get_env()
- Automatic .env loading

Usage:
    from config import PROJECT_ROOT, get_env

    suffix = get_env("PROMPTFLOW_PROMPT_SUFFIX", default="")
    samples_dir = PROJECT_ROOT / "data" / "samples"
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from exceptions import ConfigurationError

# Calculate paths once at import time
SRC_DIR = Path(__file__).parent.resolve()
PROJECT_ROOT = SRC_DIR.parent.resolve()

# Load .env from project root
_env_path = PROJECT_ROOT / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

DEFAULT_LAUNCH_URL = "https://grok.com/imagine"
DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB


def get_env(key: str, default: Optional[str] = None) -> str:
    """Get environment variable value.

    Args:
        key: Environment variable name
        default: Default value if not set. If None and key not found, raises KeyError.

    Returns:
        Environment variable value or default

    Raises:
        KeyError: If key not found and no default provided
    """
    value = os.environ.get(key)
    if value is not None:
        return value
    if default is not None:
        return default
    raise KeyError(f"Environment variable '{key}' not set and no default provided")


def get_launch_url() -> str:
    """Get the URL opened after a prompt is copied."""
    return get_env("PROMPTFLOW_LAUNCH_URL", default=DEFAULT_LAUNCH_URL)


def get_prompt_suffix() -> str:
    """Get the global suffix appended to every launched prompt."""
    return get_env("PROMPTFLOW_PROMPT_SUFFIX", default="")


def get_max_file_size() -> int:
    """Get the per-file size ceiling in bytes.

    Raises:
        ConfigurationError: If PROMPTFLOW_MAX_FILE_SIZE is not a positive integer
    """
    raw = get_env("PROMPTFLOW_MAX_FILE_SIZE", default=str(DEFAULT_MAX_FILE_SIZE))
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"PROMPTFLOW_MAX_FILE_SIZE must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"PROMPTFLOW_MAX_FILE_SIZE must be positive, got {value}")
    return value


def get_backend_url() -> str:
    """Get backend URL for API calls."""
    return get_env("BACKEND_URL", default="http://localhost:8000")
