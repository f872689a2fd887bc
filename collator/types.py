from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from collator.errors import FragmentReadError


@functools.total_ordering
class OrderingKey:
    """Comparable key derived from a fragment's filename.

    Every ``Matched`` key sorts before every ``Unmatched`` key. Matched keys
    compare by ``(major, minor, tertiary)``; unmatched keys are all equal.
    """

    def sort_tuple(self) -> Tuple:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderingKey):
            return NotImplemented
        return self.sort_tuple() == other.sort_tuple()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OrderingKey):
            return NotImplemented
        return self.sort_tuple() < other.sort_tuple()

    def __hash__(self) -> int:
        return hash(self.sort_tuple())


@dataclass(frozen=True, eq=False)
class Matched(OrderingKey):
    major: int
    minor: int
    tertiary: float

    def sort_tuple(self) -> Tuple:
        return (0, self.major, self.minor, self.tertiary)


@dataclass(frozen=True, eq=False)
class Unmatched(OrderingKey):
    # informational only, ignored by comparisons
    reason: str = "no-match"

    def sort_tuple(self) -> Tuple:
        return (1,)


@dataclass
class Fragment:
    """One transcript file: its path and, once loaded, its raw text."""

    path: str
    raw_content: Optional[str] = field(default=None, repr=False)

    @property
    def basename(self) -> str:
        return os.path.basename(self.path)

    @functools.cached_property
    def key(self) -> OrderingKey:
        # collator.keys imports this module
        from collator.keys import extract_key

        return extract_key(self.basename)

    def load(self, encoding: str = "utf-8-sig") -> str:
        """Read the file on first call and return the cached text afterwards."""
        if self.raw_content is None:
            try:
                with open(self.path, "r", encoding=encoding) as f:
                    self.raw_content = f.read()
            except (OSError, UnicodeDecodeError) as e:
                raise FragmentReadError(self.path, str(e)) from e
        return self.raw_content


@dataclass
class TranscriptResult:
    title: str
    text: str
    fragments: List[Fragment]
    diagnostics: List[str]
