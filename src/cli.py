"""
Command-line interface for extracting scene prompts.

Usage:
    promptflow prompts/episode1.md prompts/episode2.json
    promptflow prompts/ --json > scenes.json
    pbpaste | promptflow --stdin
    promptflow prompts/episode1.md --launch 3 --suffix "cinematic, 35mm"
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from config import get_prompt_suffix
from exceptions import ClipboardError, PromptFlowError
from launcher import PromptLauncher
from logging_config import get_run_logger, resolve_level, setup_logging
from prompt_extraction import PASTED_SOURCE_LABEL, SceneRecord
from scene_board import SceneBoard, list_source_files


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptflow",
        description="Extract numbered scene prompts from AI assistant output"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Text files or directories to read"
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help=f"Read pasted text from stdin (labelled '{PASTED_SOURCE_LABEL}')"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print scenes as JSON instead of a table"
    )
    parser.add_argument(
        "--suffix",
        default=None,
        help="Global suffix appended to launched prompts (default: PROMPTFLOW_PROMPT_SUFFIX)"
    )
    parser.add_argument(
        "--launch",
        type=int,
        metavar="N",
        help="Copy the N-th scene (1-based) to the clipboard and open the generation site"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Parallel workers for many files (default: 1)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log per-chunk extraction decisions"
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Also write promptflow.log into this directory"
    )
    return parser


def format_table(scenes: List[SceneRecord]) -> str:
    lines = []
    for index, scene in enumerate(scenes, start=1):
        lines.append(f"{index:>3}. Scene {scene.scene_number:<4} {scene.short_label}  ({scene.source})")
    lines.append(f"{len(scenes)} scene(s) found")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_dir:
        logger = get_run_logger("promptflow", args.log_dir, level=resolve_level(args.verbose))
    else:
        logger = setup_logging("promptflow", verbose=args.verbose)

    if not args.paths and not args.stdin:
        parser.error("give at least one path or --stdin")

    try:
        board = SceneBoard()
        files: List[Path] = []
        for path in args.paths:
            if path.is_dir():
                files.extend(list_source_files(path))
            else:
                files.append(path)
        if files:
            board.add_files(files, max_workers=args.workers)
        if args.stdin:
            board.add_text(sys.stdin.read())
    except PromptFlowError as e:
        logger.error(str(e))
        return 1

    scenes = board.scenes
    print(board.to_json() if args.json else format_table(scenes))

    if args.launch is not None:
        if not 1 <= args.launch <= len(scenes):
            logger.error(f"--launch {args.launch} is out of range (1-{len(scenes)})")
            return 2
        suffix = args.suffix if args.suffix is not None else get_prompt_suffix()
        try:
            result = PromptLauncher().launch(scenes[args.launch - 1], suffix=suffix)
        except ClipboardError as e:
            logger.error(str(e))
            return 1
        logger.info(f"Prompt copied; opened {result.url}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
