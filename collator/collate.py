from __future__ import annotations

import glob
import os
from typing import List, Sequence

from collator.config import PARAGRAPH_SEPARATOR, CollatorConfig, normalize_suffix
from collator.logging_utils import get_logger
from collator.normalize import clean
from collator.report import report
from collator.sorting import sort_fragments
from collator.types import Fragment, TranscriptResult

log = get_logger(__name__)


def discover_fragments(input_dir: str, file_extension: str = ".srt") -> List[Fragment]:
    """List files in ``input_dir`` ending in ``file_extension``, by name."""
    if not os.path.isdir(input_dir):
        log.warning(f"input directory not found: {input_dir}", extra={"input_dir": input_dir})
        return []
    suffix = normalize_suffix(file_extension)
    paths = glob.glob(os.path.join(glob.escape(input_dir), f"*{glob.escape(suffix)}"))
    fragments = [Fragment(path=p) for p in sorted(paths) if os.path.isfile(p)]
    log.debug("fragments discovered", extra={"input_dir": input_dir, "count": len(fragments)})
    return fragments


def collate(ordered: Sequence[Fragment], separator: str = PARAGRAPH_SEPARATOR) -> str:
    """Read, clean and join fragments in the given order.

    Every cleaned fragment is followed by ``separator``. A fragment that
    cannot be read raises ``FragmentReadError`` and nothing is returned.
    """
    parts: List[str] = []
    for fragment in ordered:
        content = clean(fragment.load())
        parts.append(content)
        parts.append(separator)
        log.debug("fragment appended", extra={"file": fragment.basename, "chars": len(content)})
    return "".join(parts)


def build_transcript(config: CollatorConfig) -> TranscriptResult:
    """Discover, sort, report and collate the fragments described by ``config``."""
    fragments = discover_fragments(config.input_dir, config.suffix)
    ordered = sort_fragments(fragments)
    diagnostics = report(ordered)
    text = collate(ordered, config.paragraph_separator)
    log.info("transcript collated", extra={"fragments": len(ordered), "chars": len(text)})
    return TranscriptResult(
        title=config.output_title,
        text=text,
        fragments=ordered,
        diagnostics=diagnostics,
    )
