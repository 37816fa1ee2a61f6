"""Running list of scenes collected from files and pasted text."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from config import get_max_file_size
from exceptions import FileTooLargeError, InputError
from prompt_extraction import PASTED_SOURCE_LABEL, SceneRecord, extract

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def decode_text(data: bytes) -> str:
    """Decode file bytes as UTF-8, tolerating a BOM and invalid sequences."""
    return data.decode("utf-8-sig", errors="replace")


def read_source_file(path: PathLike, max_size: int) -> str:
    """
    Read a text file for extraction.

    Raises:
        InputError: If the path is missing, not a file, or unreadable
        FileTooLargeError: If the file is larger than max_size bytes
    """
    path = Path(path)
    if not path.exists():
        raise InputError(f"File not found: {path}")
    if not path.is_file():
        raise InputError(f"Not a file: {path}")

    size = path.stat().st_size
    if size > max_size:
        raise FileTooLargeError(path.name, size, max_size)

    try:
        return decode_text(path.read_bytes())
    except OSError as e:
        raise InputError(f"Could not read {path}: {e}") from e


def list_source_files(directory: PathLike, recursive: bool = True) -> List[Path]:
    """
    List the non-hidden files of a directory, sorted by path.

    Raises:
        InputError: If directory does not exist or is not a directory
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise InputError(f"Not a directory: {directory}")

    pattern = "**/*" if recursive else "*"
    return sorted(
        p for p in directory.glob(pattern)
        if p.is_file() and not any(part.startswith(".") for part in p.relative_to(directory).parts)
    )


class SceneBoard:
    """
    Accumulates extracted scenes in arrival order.

    Usage:
        board = SceneBoard()
        board.add_files(["prompts/part1.md", "prompts/part2.json"])
        board.add_text(pasted)  # labelled "Pasted Content"
        for scene in board:
            print(scene.scene_number, scene.short_label)
        board.clear()
    """

    def __init__(self, max_file_size: Optional[int] = None):
        self.max_file_size = max_file_size if max_file_size is not None else get_max_file_size()
        self._scenes: List[SceneRecord] = []

    @property
    def scenes(self) -> List[SceneRecord]:
        return list(self._scenes)

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self) -> Iterator[SceneRecord]:
        return iter(list(self._scenes))

    def get(self, scene_id: str) -> Optional[SceneRecord]:
        for scene in self._scenes:
            if scene.id == scene_id:
                return scene
        return None

    def clear(self) -> int:
        """Discard every scene. Returns how many were removed."""
        removed = len(self._scenes)
        self._scenes = []
        logger.info(f"Cleared {removed} scene(s)")
        return removed

    def add_text(self, text: str, source: str = PASTED_SOURCE_LABEL) -> List[SceneRecord]:
        """Extract scenes from text and append them. Blank text is ignored."""
        if not text or not text.strip():
            return []
        scenes = extract(text, source)
        self._scenes.extend(scenes)
        return scenes

    def add_bytes(self, data: bytes, source: str) -> List[SceneRecord]:
        """
        Extract scenes from uploaded file contents.

        Raises:
            FileTooLargeError: If data is larger than the size ceiling
        """
        if len(data) > self.max_file_size:
            raise FileTooLargeError(source, len(data), self.max_file_size)
        return self.add_text(decode_text(data), source)

    def add_file(self, path: PathLike) -> List[SceneRecord]:
        """
        Extract scenes from one file and append them.

        Files over the size ceiling are skipped with a warning.

        Raises:
            InputError: If the file is missing or unreadable
        """
        path = Path(path)
        try:
            text = read_source_file(path, self.max_file_size)
        except FileTooLargeError as e:
            logger.warning(f"Skipping oversized file: {e}")
            return []
        return self.add_text(text, path.name)

    def add_files(self, paths: Iterable[PathLike], max_workers: int = 1) -> List[SceneRecord]:
        """
        Extract scenes from several files, in the order given.

        Files are independent, so with max_workers > 1 they are read and
        parsed in a thread pool; results are still appended in argument order.
        Unreadable and oversized files are logged and skipped.

        Args:
            paths: Files to process
            max_workers: Thread pool size (1 = sequential)

        Returns:
            All scenes added by this call
        """
        paths = [Path(p) for p in paths]
        if max_workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                results = list(executor.map(self._extract_file, paths))
        else:
            results = [self._extract_file(p) for p in paths]

        added: List[SceneRecord] = []
        for scenes in results:
            added.extend(scenes)
        self._scenes.extend(added)
        logger.info(f"Added {len(added)} scene(s) from {len(paths)} file(s)")
        return added

    def add_directory(self, directory: PathLike, recursive: bool = True) -> List[SceneRecord]:
        """
        Extract scenes from every non-hidden file in a directory (sorted by path).

        Raises:
            InputError: If directory does not exist or is not a directory
        """
        return self.add_files(list_source_files(directory, recursive))

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps([scene.model_dump() for scene in self._scenes], ensure_ascii=False, indent=indent)

    def _extract_file(self, path: Path) -> List[SceneRecord]:
        try:
            text = read_source_file(path, self.max_file_size)
        except FileTooLargeError as e:
            logger.warning(f"Skipping oversized file: {e}")
            return []
        except InputError as e:
            logger.warning(f"Skipping unreadable file: {e}")
            return []
        return extract(text, path.name)
