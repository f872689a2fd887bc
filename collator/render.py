from __future__ import annotations

import os
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib import pagesizes
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate, Spacer

from collator.config import PARAGRAPH_SEPARATOR, PageLayout
from collator.errors import RenderError
from collator.logging_utils import get_logger

log = get_logger(__name__)


def _page_size(name: str):
    try:
        return getattr(pagesizes, name.upper())
    except AttributeError:
        raise RenderError(f"Unknown page size: {name}")


def build_story(title: str, body: str, layout: PageLayout,
                separator: str = PARAGRAPH_SEPARATOR) -> List[Flowable]:
    """Build the flowables for a title followed by one paragraph per block of text."""
    title_style = ParagraphStyle(
        "TranscriptTitle",
        fontName=layout.title_font_name,
        fontSize=layout.title_font_size,
        leading=layout.title_font_size * 1.2,
        alignment=TA_CENTER,
    )
    body_style = ParagraphStyle(
        "TranscriptBody",
        fontName=layout.font_name,
        fontSize=layout.font_size,
        leading=layout.font_size + layout.leading,
        alignment=TA_LEFT,
        spaceAfter=layout.font_size,
    )

    story: List[Flowable] = [
        Paragraph(escape(title), title_style),
        Spacer(1, layout.title_space_after),
    ]
    for block in body.split(separator):
        if block.strip():
            # transcript text is plain, never reportlab markup
            story.append(Paragraph(escape(block), body_style))
    return story


def render_pdf(title: str, body: str, output_path: str, layout: PageLayout = PageLayout(),
               separator: str = PARAGRAPH_SEPARATOR) -> str:
    """Write ``title`` and ``body`` to a PDF at ``output_path`` and return the path."""
    top, right, bottom, left = layout.margins
    out_dir = os.path.dirname(output_path)
    try:
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        doc = SimpleDocTemplate(
            output_path,
            pagesize=_page_size(layout.page_size),
            topMargin=top,
            rightMargin=right,
            bottomMargin=bottom,
            leftMargin=left,
            title=title,
        )
        doc.build(build_story(title, body, layout, separator))
    except RenderError:
        raise
    except Exception as e:
        log.exception("render_pdf failed")
        raise RenderError(str(e)) from e
    log.info("PDF written", extra={"output": output_path, "chars": len(body)})
    return output_path
