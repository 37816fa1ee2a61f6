"""Tunable thresholds for scene extraction.

All lengths are character counts of stripped text. A value is "below" a
threshold when it is strictly shorter than it.
"""

# JSON scenes need a description longer than this
JSON_MIN_DESCRIPTION_LENGTH = 10

# Raw heuristic chunks shorter than this are noise (unless they look like a title)
MIN_CHUNK_LENGTH = 10

# Cleaned descriptions shorter than this are discarded (unless they look like a title)
MIN_DESCRIPTION_LENGTH = 10

# Leading chatter ("Here are your prompts:") is only dropped when shorter than this
FILLER_MAX_LENGTH = 200

# Chunks shorter than this with no sentence ending are treated as titles
TITLE_MAX_LENGTH = 50

# Title prefixes ("Neon Chase — ...") longer than this are left in place
TITLE_PREFIX_MAX_LENGTH = 60

SHORT_LABEL_LENGTH = 40
ELLIPSIS = "..."

PASTED_SOURCE_LABEL = "Pasted Content"
