"""Stitch stand-alone title chunks onto the prompt that follows them.

Header splitting sometimes isolates a title ("### 3. Neon Chase") from the
prompt body in the next paragraph. Title chunks are folded into the next
chunk as a "[Title]" line and never appear on their own.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from .cleanup import looks_like_title
from .models import SceneCandidate

logger = logging.getLogger(__name__)


def merge_title_chunks(candidates: List[SceneCandidate]) -> List[SceneCandidate]:
    """
    Merge title-like chunks into the chunk that follows them.

    Consecutive titles pile up and land together on the first non-title
    chunk, one "[Title]" line each. A title whose number came from a header
    marker overrides the receiving chunk's number; a sequential fallback
    number does not.

    Args:
        candidates: Filtered chunks in document order (not modified)

    Returns:
        Merged chunks; never longer than the non-stub input and never empty
        when the input holds at least one non-stub chunk
    """
    # Index of the last chunk that can stand alone; stubs after it have nothing to merge into
    last = max((i for i, c in enumerate(candidates) if not c.title_stub), default=-1)
    merged: List[SceneCandidate] = []
    pending_titles: List[str] = []
    pending_number: Optional[str] = None

    for i, original in enumerate(candidates):
        if original.title_stub or (i < last and looks_like_title(original.description)):
            logger.debug(f"Merging title chunk {original.description!r} forward")
            pending_titles.append(original.description)
            if original.explicit_number:
                pending_number = original.scene_number
            continue

        current = replace(original)
        if pending_titles:
            prefix = "\n".join(f"[{title}]" for title in pending_titles)
            current.description = f"{prefix}\n{current.description}"
            if pending_number is not None:
                current.scene_number = pending_number
                current.explicit_number = True
            pending_titles = []
            pending_number = None

        merged.append(current)

    if pending_titles:
        logger.debug(f"Dropping unmerged title stub(s) {pending_titles!r}")
    return merged
