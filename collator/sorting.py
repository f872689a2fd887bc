from __future__ import annotations

from typing import Iterable, List

from collator.types import Fragment


def sort_fragments(fragments: Iterable[Fragment]) -> List[Fragment]:
    """Return fragments ordered by filename key, unmatched files last.

    ``sorted`` is stable, so fragments with equal keys (in particular all
    unmatched ones) keep their input order.
    """
    return sorted(fragments, key=lambda fragment: fragment.key)
