"""Filename grammar for ordering transcript fragments.

Fragments are named after the course structure they were exported from,
for example ``C1 - L2 - A3.5 Intro.srt``:

    C<major> SEP L<minor> SEP [prefix]<number>

where SEP is one or more spaces or hyphens, ``prefix`` is an optional run of
letters and ``number`` is an integer or decimal. Filenames outside this
grammar are not an error; they get an ``Unmatched`` key and sort last.
"""

from __future__ import annotations

import re

from collator.logging_utils import get_logger
from collator.types import Matched, OrderingKey, Unmatched

log = get_logger(__name__)

FILENAME_RE = re.compile(
    r"C(?P<major>\d+)[ \-]+"
    r"L(?P<minor>\d+)[ \-]+"
    r"(?P<prefix>[A-Za-z]*)(?P<number>[\d.]+)"
)


def extract_key(basename: str) -> OrderingKey:
    """Parse ``basename`` into a ``Matched`` key or an ``Unmatched`` marker."""
    m = FILENAME_RE.search(basename)
    if m is None:
        log.debug("filename does not match naming convention", extra={"file": basename})
        return Unmatched()

    try:
        # int() refuses digit runs past sys.get_int_max_str_digits()
        major = int(m.group("major"))
        minor = int(m.group("minor"))
        # "3.5.srt" leaves the extension dot on the token
        tertiary = float(m.group("number").rstrip("."))
    except ValueError:
        log.warning(
            f"malformed number in {basename!r}; treating as unmatched",
            extra={"file": basename, "token": m.group("prefix") + m.group("number")},
        )
        return Unmatched(reason="malformed-number")

    return Matched(major=major, minor=minor, tertiary=tertiary)
