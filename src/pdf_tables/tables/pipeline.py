"""Per-page and per-document table extraction.

Each page goes down one of two paths:
  - text layer present: fragments -> lines -> candidate tables -> normalized tables
  - no text layer: OCR text -> fixed internship record (at most one table)

Pages are processed strictly one after another; a page's collaborators (text
extraction, rendering, OCR) finish before the next page starts, so only one
page's fragments or rendered image is alive at a time and tables come out in
page order.  Collaborator failures are not caught here.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import TypeVar

import pymupdf
from tqdm import tqdm

from pdf_tables.config import OCR_DPI
from pdf_tables.extraction.ocr import get_client, run_ocr_on_page
from pdf_tables.extraction.text_layer import get_fragments_for_page
from pdf_tables.tables.detection import detect_tables_from_lines
from pdf_tables.tables.lines import group_fragments_into_lines
from pdf_tables.tables.records import detect_internship_record
from pdf_tables.tables.schema import Fragment, Table

logger = logging.getLogger(__name__)

PageT = TypeVar("PageT")


# ─── Single Page ─────────────────────────────────────────────────────────────


def extract_tables_from_page(fragments: Sequence[Fragment], ocr_text: str | None = None) -> list[Table]:
    """Return the tables on one page, from its fragments or (if it has none) its OCR text."""
    if fragments:
        return detect_tables_from_lines(group_fragments_into_lines(fragments))

    record = detect_internship_record(ocr_text)
    return [record] if record is not None else []


# ─── Whole Document ──────────────────────────────────────────────────────────


def extract_tables(
    pages: Iterable[PageT],
    get_fragments: Callable[[PageT], Sequence[Fragment]],
    run_ocr: Callable[[PageT], str],
) -> list[Table]:
    """Run table extraction over every page in order and concatenate the results.

    ``run_ocr`` is only called for pages whose text layer yields no fragments.
    """
    all_tables: list[Table] = []
    for page_num, page in enumerate(tqdm(pages, desc="Extracting tables", unit="page"), start=1):
        fragments = get_fragments(page)
        if fragments:
            page_tables = extract_tables_from_page(fragments)
        else:
            logger.info("No text layer on page %d; running OCR", page_num)
            page_tables = extract_tables_from_page([], ocr_text=run_ocr(page))

        logger.debug("Page %d: %d table(s)", page_num, len(page_tables))
        all_tables.extend(page_tables)

    logger.info("Extracted %d table(s)", len(all_tables))
    return all_tables


def extract_tables_from_pdf(pdf_path: str | Path, ocr_client=None, dpi: int = OCR_DPI) -> list[Table]:
    """Open a PDF with PyMuPDF and extract tables from all of its pages.

    The OCR client is only created (from the environment) if some page has no
    text layer, so text-only documents need no Azure credentials.
    """
    client = ocr_client

    def _run_ocr(page: pymupdf.Page) -> str:
        nonlocal client
        if client is None:
            client = get_client()
        return run_ocr_on_page(page, client, dpi=dpi)

    with pymupdf.open(str(pdf_path)) as doc:
        logger.info("Opened %s (%d pages)", pdf_path, doc.page_count)
        return extract_tables(doc, get_fragments_for_page, _run_ocr)
