from __future__ import annotations

from typing import List, Sequence

from collator.types import Fragment, Matched

NO_FILES_MESSAGE = "No files found in the directory or none matched the pattern."
ORDER_HEADING = "Order of files to be processed:"


def describe(fragment: Fragment) -> str:
    key = fragment.key
    if isinstance(key, Matched):
        return f"{fragment.basename} -> [C: {key.major}, L: {key.minor}, Third: {key.tertiary}]"
    return f"{fragment.basename} -> [Unmatched]"


def report(ordered: Sequence[Fragment]) -> List[str]:
    """Return one diagnostic line per fragment, in processing order.

    Uses the key cached on each fragment, i.e. the same value the sorter
    ordered by.
    """
    if not ordered:
        return [NO_FILES_MESSAGE]
    return [describe(fragment) for fragment in ordered]
