"""Per-chunk cleanup: header stripping, title prefixes and labels."""

import re

from .constants import (
    ELLIPSIS,
    SHORT_LABEL_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_PREFIX_MAX_LENGTH,
)
from .segmentation import MARKER_BODY, MARKER_LEAD

# Marker plus the punctuation and markup that trails it: "**Scene 1:** ", "### 2. ", "[Scene 3] - "
_HEADER_PREFIX_RE = re.compile(
    r"^" + MARKER_LEAD + MARKER_BODY
    + r"[ \t]*[*_]*[ \t]*[.:)\]\-—–]*[ \t]*[*_]*[ \t]*",
    re.IGNORECASE,
)

# "**Neon Chase** - ...", "**Neon Chase:**\n...", or a leftover "Neon Chase**\n..."
_BOLD_TITLE_PREFIX_RE = re.compile(
    r"^\*{0,2}[^*\n]{1,%d}?\*{2}[ \t]*(?:[:\-—–][ \t]*\n?|\n)\s*" % TITLE_PREFIX_MAX_LENGTH
)

# "Neon Chase — A red car ...", "Wide Shot - camera pans ..."
_DASH_TITLE_PREFIX_RE = re.compile(
    r"^(?P<title>[^\n*.!?:]{1,%d}?)[ \t]+[—–-][ \t]+" % TITLE_PREFIX_MAX_LENGTH
)

_MINOR_WORDS = {"a", "an", "and", "at", "by", "for", "in", "of", "on", "or", "the", "to", "with"}

_EMPHASIS_ONLY_RE = re.compile(r"^[*_]+([^*_\n]+?)[*_]*$|^([^*_\n]+?)[*_]+$")

SENTENCE_ENDINGS = (".", "!", "?", "…", '."', '!"', '?"')

# A clause cut off at a comma or semicolon continues into the next chunk
CLAUSE_ENDINGS = (",", ";")


def strip_header_prefix(text: str) -> str:
    """
    Remove leading header markers ("Scene 1:", "### 2.", "[Scene 3]").

    Stacked markers ("Scene 1: Prompt 1:") are all removed, so applying
    this to an already stripped description changes nothing.
    """
    text = text.strip()
    while True:
        match = _HEADER_PREFIX_RE.match(text)
        if match is None or match.end() == 0:
            return text
        text = text[match.end():].strip()


def strip_title_prefix(text: str) -> str:
    """Remove a short "Title - " style prefix, keeping the rest of the text."""
    match = _BOLD_TITLE_PREFIX_RE.match(text)
    if match is None:
        match = _DASH_TITLE_PREFIX_RE.match(text)
        if match is not None and not _is_title_case(match.group("title")):
            match = None
    if match is not None:
        remainder = text[match.end():].strip()
        if remainder:
            return remainder

    emphasis = _EMPHASIS_ONLY_RE.match(text)
    if emphasis is not None:
        return (emphasis.group(1) or emphasis.group(2)).strip()
    return text


def _is_title_case(title: str) -> bool:
    words = title.split()
    if not words or not words[0][0].isupper():
        return False
    return all(
        word[0].isupper() or not word[0].isalpha() or word.lower() in _MINOR_WORDS
        for word in words
    )


def clean_description(chunk: str) -> str:
    """Strip header markers and title prefixes from a raw chunk."""
    return strip_title_prefix(strip_header_prefix(chunk))


def looks_like_title(text: str) -> bool:
    """
    True for a short single line that does not read as a sentence.

    "Neon Chase" and "The Forest Awakens" are titles; "A cat sits." and
    "A cat sits on the mat," are not.
    """
    text = text.strip()
    return (
        0 < len(text) < TITLE_MAX_LENGTH
        and "\n" not in text
        and any(ch.isalpha() for ch in text)
        and not text.endswith(SENTENCE_ENDINGS + CLAUSE_ENDINGS)
    )


def make_short_label(description: str) -> str:
    return description[:SHORT_LABEL_LENGTH] + ELLIPSIS
