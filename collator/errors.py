from __future__ import annotations


class CollatorError(Exception):
    """Base error for the transcript collator."""


class FragmentReadError(CollatorError, OSError):
    """Raised when a transcript fragment cannot be read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read fragment {path}: {reason}")
        self.path = path


class RenderError(CollatorError):
    """Raised when the PDF document cannot be generated."""
