from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

DEFAULT_TITLE = "Transcript of SRT Files"
PARAGRAPH_SEPARATOR = "\n\n"


def normalize_suffix(file_extension: str) -> str:
    """Extension with a leading dot, however it was configured ("srt", ".srt")."""
    ext = file_extension.strip()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class PageLayout:
    """Rendering constants handed to the PDF writer."""

    page_size: str = "A4"
    # top, right, bottom, left in points
    margins: Tuple[float, float, float, float] = (50, 50, 50, 50)
    font_name: str = "Helvetica"
    font_size: float = 12
    leading: float = 4
    title_font_name: str = "Helvetica-Bold"
    title_font_size: float = 16
    title_space_after: float = 20


@dataclass(frozen=True)
class CollatorConfig:
    input_dir: str = "Text"
    file_extension: str = ".srt"
    output_title: str = DEFAULT_TITLE
    paragraph_separator: str = PARAGRAPH_SEPARATOR
    output_file: str = "combined_transcript.pdf"
    layout: PageLayout = field(default_factory=PageLayout)

    @property
    def suffix(self) -> str:
        return normalize_suffix(self.file_extension)
