from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from collator.collate import build_transcript
from collator.config import DEFAULT_TITLE, CollatorConfig
from collator.errors import CollatorError
from collator.logging_utils import setup_logging, get_logger
from collator.render import render_pdf
from collator.report import ORDER_HEADING

log = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for transcript collation."""
    parser = argparse.ArgumentParser(description="Combine a folder of .srt transcripts into one PDF")
    parser.add_argument("--input_dir", type=str, default="Text", help="Directory containing the .srt files (default: Text)")
    parser.add_argument("--extension", type=str, default=".srt", help="File extension to collect (default: .srt)")
    parser.add_argument("--output_file", type=str, default="combined_transcript.pdf",
                        help="Output PDF path (default: combined_transcript.pdf)")
    parser.add_argument("--title", type=str, default=DEFAULT_TITLE, help="Document title")
    parser.add_argument("--summary", action="store_true", help="Only print the processing order, do not write a PDF")
    parser.add_argument("--log_level", type=str, default=None, help="Log level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for generating the combined transcript PDF.

    Examples:
      python3 transcript_pdf_generator.py
      python3 transcript_pdf_generator.py --input_dir lectures/Text --output_file out/course.pdf
      python3 transcript_pdf_generator.py --input_dir lectures/Text --summary
    """
    args = parse_args(argv)
    setup_logging(args.log_level)
    config = CollatorConfig(
        input_dir=args.input_dir,
        file_extension=args.extension,
        output_title=args.title,
        output_file=args.output_file,
    )
    log.info("transcript collation start", extra={
        "input_dir": config.input_dir, "extension": config.suffix, "output": config.output_file
    })

    try:
        result = build_transcript(config)
    except CollatorError as e:
        log.error(f"collation aborted: {e}", extra={"path": getattr(e, "path", None)})
        return 1

    if result.fragments:
        log.info(ORDER_HEADING)
    for line in result.diagnostics:
        log.info(line)

    if args.summary:
        return 0

    try:
        out = render_pdf(result.title, result.text, config.output_file, config.layout,
                         config.paragraph_separator)
    except CollatorError as e:
        log.error(f"PDF generation failed: {e}")
        return 1
    log.info(f"PDF generated: {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
