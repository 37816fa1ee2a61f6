"""Find scene objects embedded as JSON in assistant output.

Assistants often answer with a JSON array (sometimes inside a ```json fence,
sometimes surrounded by chatter). Every '{' or '[' in the text is tried as the
start of a JSON value; whatever parses and carries a "description" becomes a
scene. Fragments that do not parse are skipped.
"""

import json
import logging
import re
from typing import Any, Iterator, List, Optional, Tuple

from .constants import JSON_MIN_DESCRIPTION_LENGTH
from .models import SceneRecord

logger = logging.getLogger(__name__)

DESCRIPTION_KEY = "description"

_decoder = json.JSONDecoder()
_OPENING_BRACKET_RE = re.compile(r"[\[{]")


def iter_json_values(text: str) -> Iterator[Tuple[Any, int, int]]:
    """
    Yield (value, start, end) for every bracket-matched JSON value mentioning
    a description.

    The caller tells the generator where to resume by sending the next
    position; without a send, scanning resumes one character after the start
    of the last value so nested objects are still visited.
    """
    pos = 0
    while True:
        match = _OPENING_BRACKET_RE.search(text, pos)
        if match is None:
            return
        start = match.start()
        try:
            value, end = _decoder.raw_decode(text, start)
        except (ValueError, RecursionError):
            pos = start + 1
            continue

        if DESCRIPTION_KEY not in text[start:end]:
            # Nothing nested inside can mention it either
            pos = end
            continue

        resume = yield value, start, end
        pos = resume if resume is not None else start + 1


def extract_json_scenes(text: str, source: str) -> List[SceneRecord]:
    """
    Extract scenes from JSON objects/arrays found anywhere in the text.

    Args:
        text: Raw assistant output
        source: Provenance label stored on each record

    Returns:
        SceneRecords in document order (empty list if no usable JSON found)
    """
    if DESCRIPTION_KEY not in text:
        return []

    records: List[SceneRecord] = []
    values = iter_json_values(text)
    resume = None
    while True:
        try:
            value, start, end = values.send(resume)
        except StopIteration:
            break

        accepted = 0
        for item in _scene_items(value):
            record = _record_from_item(item, len(records) + 1, source)
            if record is not None:
                records.append(record)
                accepted += 1

        if accepted:
            logger.debug(f"JSON block at {start}-{end} produced {accepted} scene(s)")
            resume = end
        else:
            resume = None

    return records


def _scene_items(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return [value]
    return []


def _record_from_item(item: Any, position: int, source: str) -> Optional[SceneRecord]:
    if not isinstance(item, dict):
        return None

    description = item.get(DESCRIPTION_KEY)
    if not isinstance(description, str) or len(description.strip()) <= JSON_MIN_DESCRIPTION_LENGTH:
        return None

    scene_number = format_scene_number(item.get("scene_number")) or str(position)
    short_label = _label_from_item(item) or f"Scene {position}"

    return SceneRecord(
        scene_number=scene_number,
        description=description,
        short_label=short_label,
        source=source,
    )


def format_scene_number(value: Any) -> Optional[str]:
    """Render a JSON scene_number as text; None if absent or unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, str):
        return value.strip() or None
    return None


def _label_from_item(item: dict) -> Optional[str]:
    visuals = item.get("visuals")
    if isinstance(visuals, dict):
        subject = visuals.get("subject")
        if isinstance(subject, str) and subject.strip():
            return subject.strip()

    title = item.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()

    return None
