"""Split free-form assistant output into candidate scene chunks."""

import re
from typing import List, Optional

from .constants import FILLER_MAX_LENGTH

# Markup allowed in front of a marker: indentation, bold/italics, quotes, bullets, headings
MARKER_LEAD = r"[ \t>*_#•\-]*"

# "Scene 3", "Prompt 12", "### 4", "### **4", "[Scene 5]"
MARKER_BODY = (
    r"(?:\[[ \t]*Scene[ \t]*\d+[ \t]*\]"
    r"|(?:Scene|Prompt)[ \t]*#?[ \t]*\d+\b"
    r"|#{1,6}[ \t]*[*_]*[ \t]*\d+\b)"
)

# Zero-width split point in front of a marker at a line start or after punctuation.
# A marker inside running words ("we watched Scene 2 of ...") does not split.
_MARKER_SPLIT_RE = re.compile(
    r"(?:^|(?<=[.!?,;)\]—–-]))[ \t]*(?=" + MARKER_LEAD + MARKER_BODY + r")",
    re.IGNORECASE | re.MULTILINE,
)

_HEADER_NUMBER_RE = re.compile(
    r"^" + MARKER_LEAD
    + r"(?:\[[ \t]*Scene|Scene|Prompt|#{1,6}[ \t]*[*_]*)[ \t]*#?[ \t]*(\d+)",
    re.IGNORECASE,
)

_BLANK_LINE_RE = re.compile(r"\n\s*\n")

_FILLER_RE = re.compile(
    r"^[\W_]*(?:got it|here are|here is|here['’]s|below are|sure\b|certainly|of course"
    r"|absolutely|okay\b|ok\b|i['’]ve written|i have written|i['’]ve created|the following)",
    re.IGNORECASE,
)


def split_on_blank_lines(text: str) -> List[str]:
    """Split text into paragraphs separated by one or more blank lines."""
    return [part.strip() for part in _BLANK_LINE_RE.split(text) if part.strip()]


def marker_positions(text: str) -> List[int]:
    """Return the offsets where header markers start."""
    return [match.end() for match in _MARKER_SPLIT_RE.finditer(text)]


def split_into_chunks(text: str) -> List[str]:
    """
    Split text so every header marker starts its own chunk.

    Text in front of the first marker is split on blank lines so chatter and
    a bare title end up in separate chunks. When fewer than two chunks come
    out, the whole text is split on blank lines instead.

    Args:
        text: Raw assistant output

    Returns:
        Non-empty, stripped chunks in document order
    """
    starts = marker_positions(text)
    if not starts:
        return split_on_blank_lines(text)

    bounds = starts + [len(text)]
    sections = [text[begin:end].strip() for begin, end in zip(bounds, bounds[1:])]
    chunks = split_on_blank_lines(text[:starts[0]]) + [s for s in sections if s]

    if len(chunks) <= 1:
        return split_on_blank_lines(text)
    return chunks


def header_number(chunk: str) -> Optional[str]:
    """Return the digit group of a leading header marker, if any."""
    match = _HEADER_NUMBER_RE.match(chunk)
    return match.group(1) if match else None


def is_conversational_filler(chunk: str) -> bool:
    """True for short assistant chatter such as "Sure! Here are your prompts:"."""
    return len(chunk) < FILLER_MAX_LENGTH and _FILLER_RE.match(chunk) is not None
