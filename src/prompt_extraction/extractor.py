"""Turn raw assistant output into an ordered list of scene prompts.

Pipeline:
1. JSON scan - if any JSON object/array yields scenes, those are the result
2. Header-marker segmentation, falling back to blank-line paragraphs
3. Filler filtering and per-chunk cleanup
4. Title merge pass
"""

import logging
from typing import List, Optional

from .cleanup import clean_description, looks_like_title, make_short_label
from .constants import MIN_CHUNK_LENGTH, MIN_DESCRIPTION_LENGTH, PASTED_SOURCE_LABEL
from .json_blocks import extract_json_scenes
from .merge import merge_title_chunks
from .models import SceneCandidate, SceneRecord
from .segmentation import header_number, is_conversational_filler, split_into_chunks

logger = logging.getLogger(__name__)


def extract(text: Optional[str], source: str = PASTED_SOURCE_LABEL) -> List[SceneRecord]:
    """
    Extract scene prompts from raw text.

    Never raises on malformed input: broken JSON falls through to the text
    heuristics, and text with nothing usable yields an empty list.

    Args:
        text: Raw assistant output (file contents or pasted text)
        source: Provenance label stored on every record

    Returns:
        SceneRecords in document order

    Example:
        >>> scenes = extract("Scene 1: A cat sits.\\n\\nScene 2: A dog runs.", "notes.txt")
        >>> [s.scene_number for s in scenes]
        ['1', '2']
    """
    if not text or not text.strip():
        return []

    records = extract_json_scenes(text, source)
    if records:
        logger.info(f"Extracted {len(records)} JSON scene(s) from {source}")
        return records

    candidates = collect_candidates(text)
    merged = merge_title_chunks(candidates)
    records = [candidate.to_record(source) for candidate in merged]
    logger.info(f"Extracted {len(records)} scene(s) from {source} ({len(candidates)} chunk(s) before merge)")
    return records


def collect_candidates(text: str) -> List[SceneCandidate]:
    """
    Segment text and keep the chunks that look like prompts.

    Chunks too short to stand alone are kept as title stubs when they read
    like a title; the merge pass either folds them forward or drops them.
    """
    candidates: List[SceneCandidate] = []
    accepted = 0

    for chunk in split_into_chunks(text):
        description = clean_description(chunk)

        too_short = len(chunk) < MIN_CHUNK_LENGTH
        if too_short and not looks_like_title(description):
            logger.debug(f"Dropping short chunk {chunk!r}")
            continue

        # Chatter only ever precedes the first real scene
        if accepted == 0 and is_conversational_filler(chunk):
            logger.debug(f"Dropping filler {chunk[:40]!r}")
            continue

        number = header_number(chunk)
        explicit = number is not None
        if number is None:
            number = str(accepted + 1)

        stub = too_short or len(description) < MIN_DESCRIPTION_LENGTH
        if stub and not looks_like_title(description):
            logger.debug(f"Dropping chunk with nothing left after cleanup: {chunk[:40]!r}")
            continue

        candidates.append(SceneCandidate(
            scene_number=number,
            description=description,
            short_label=make_short_label(description),
            explicit_number=explicit,
            title_stub=stub,
        ))
        if not stub:
            accepted += 1

    return candidates
