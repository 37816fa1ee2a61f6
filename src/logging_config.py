"""
Centralized logging configuration for PromptFlow.

Library modules only call logging.getLogger(__name__); scripts and the
backend entry point call setup_logging() once.

Log levels:
    DEBUG: Per-chunk extraction decisions (kept, dropped, merged)
    INFO: Normal workflow progress (scenes extracted per source)
    WARNING: Non-fatal issues (oversized or unreadable files skipped)
    ERROR: Clipboard failures, unrecoverable errors

Usage:
    from logging_config import setup_logging

    logger = setup_logging(__name__, verbose=args.verbose)
    logger.info("Extraction started")
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from config import get_env

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(verbose: bool = False) -> int:
    """Pick the log level: DEBUG when verbose, else PROMPTFLOW_LOG_LEVEL (default INFO)."""
    if verbose:
        return logging.DEBUG
    name = get_env("PROMPTFLOW_LOG_LEVEL", default="INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    name: str,
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    console_output: bool = True,
    verbose: bool = False
) -> logging.Logger:
    """
    Configure the root logger and return a named logger.

    Handlers go on the root logger so records from library modules
    (prompt_extraction, scene_board, launcher) reach the same outputs.

    Args:
        name: Logger name (typically __name__ from calling module)
        level: Logging level (default: resolve_level(verbose))
        log_file: Optional path to write logs to file
        console_output: Whether to output to stderr (default: True)
        verbose: Shortcut for DEBUG level

    Returns:
        Logger for name
    """
    if level is None:
        level = resolve_level(verbose)

    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # stdout is reserved for scene output (e.g. --json)
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return logging.getLogger(name)


def get_run_logger(script_name: str, run_dir: Path, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger that also writes to <run_dir>/<script_name>.log.

    Args:
        script_name: Name of the script (e.g., 'extract_prompts')
        run_dir: Directory for the log file
        level: Logging level (default: resolve_level())

    Returns:
        Configured logger instance with both console and file output
    """
    log_file = run_dir / f"{script_name}.log"
    return setup_logging(script_name, level=level, log_file=log_file, console_output=True)
