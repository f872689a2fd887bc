from __future__ import annotations

import re

# "12\n00:01:02,345 --> 00:01:04,000" at the start of a line, after any
# leading whitespace (NBSP and ideographic spaces included)
TIMESTAMP_RE = re.compile(
    r"^\s*(?P<index>\d+)\s+"
    r"(?P<start>\d{2}:\d{2}:\d{2},\d{3})\s*-->\s*"
    r"(?P<end>\d{2}:\d{2}:\d{2},\d{3})",
    re.MULTILINE,
)

WHITESPACE_RE = re.compile(r"\s+")
NEWLINE_RE = re.compile(r"\r\n?")


def strip_timestamps(raw: str) -> str:
    """Remove every cue index + time range found at a line start."""
    # classic Mac files end lines with a bare \r
    text = NEWLINE_RE.sub("\n", raw)
    while True:
        # removing one cue can expose another at the same position
        text, count = TIMESTAMP_RE.subn("", text)
        if not count:
            return text


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def clean(raw: str) -> str:
    """Turn raw SRT content into a single line of body text.

    Timestamps must go first: once whitespace is collapsed the cue lines
    are merged into the text and no longer start a line.
    """
    return collapse_whitespace(strip_timestamps(raw))
