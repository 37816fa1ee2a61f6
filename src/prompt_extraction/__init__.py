"""Scene prompt extraction from AI assistant output."""

from .constants import PASTED_SOURCE_LABEL
from .models import SceneRecord, SceneCandidate
from .extractor import extract, collect_candidates
from .json_blocks import extract_json_scenes
from .segmentation import split_into_chunks
from .cleanup import strip_header_prefix, clean_description
from .merge import merge_title_chunks

__all__ = [
    'PASTED_SOURCE_LABEL',
    'SceneRecord',
    'SceneCandidate',
    'extract',
    'collect_candidates',
    'extract_json_scenes',
    'split_into_chunks',
    'strip_header_prefix',
    'clean_description',
    'merge_title_chunks',
]
