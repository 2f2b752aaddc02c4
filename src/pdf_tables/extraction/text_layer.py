"""Positioned text fragments from a PDF page's native text layer (PyMuPDF)."""

import logging

import pymupdf

from pdf_tables.tables.schema import Fragment

logger = logging.getLogger(__name__)


def get_fragments_for_page(page: pymupdf.Page) -> list[Fragment]:
    """Return one Fragment per text span on *page*.

    PyMuPDF measures y downward from the top of the page; fragments use PDF
    user space instead (y upward from the bottom), so the span baseline is
    flipped against the page height.
    """
    height = page.rect.height
    fragments: list[Fragment] = []
    for block in page.get_text("dict", flags=pymupdf.TEXTFLAGS_TEXT)["blocks"]:
        for line in block.get("lines", []):
            for span in line["spans"]:
                x, y = span["origin"]
                fragments.append(Fragment(text=span["text"], x=x, y=height - y))

    logger.debug("Page %d: %d text fragments", page.number + 1, len(fragments))
    return fragments
