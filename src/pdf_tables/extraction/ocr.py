"""OCR for pages without a text layer.

The page is rendered to a PNG with PyMuPDF and sent to Azure AI Document
Intelligence (``prebuilt-read``).  Only the recognised plain text is used;
layout information from the OCR result is ignored.
"""

import io
import logging
import os
import time

import pymupdf
from azure.ai.documentintelligence import DocumentIntelligenceClient
from azure.core.credentials import AzureKeyCredential

from pdf_tables.config import AZURE_ENDPOINT_ENV, AZURE_KEY_ENV, OCR_DPI, OCR_MODEL_ID

logger = logging.getLogger(__name__)


def get_client() -> DocumentIntelligenceClient:
    """Build a Document Intelligence client from the environment (.env is loaded by config)."""
    key = os.getenv(AZURE_KEY_ENV)
    endpoint = os.getenv(AZURE_ENDPOINT_ENV)
    if not key or not endpoint:
        raise ValueError(f"Must provide both {AZURE_KEY_ENV} and {AZURE_ENDPOINT_ENV} for OCR")

    return DocumentIntelligenceClient(endpoint=endpoint, credential=AzureKeyCredential(key))


def render_page_png(page: pymupdf.Page, dpi: int = OCR_DPI) -> bytes:
    """Render *page* to PNG bytes at the given resolution."""
    pix = page.get_pixmap(dpi=dpi, alpha=False)
    return pix.tobytes("png")


def run_ocr_on_page(page: pymupdf.Page, client: DocumentIntelligenceClient, dpi: int = OCR_DPI) -> str:
    """Render *page* and return the OCR'd text ("" when nothing was recognised).

    Service errors are not caught here; they abort processing of the document.
    """
    image = render_page_png(page, dpi=dpi)

    t0 = time.time()
    poller = client.begin_analyze_document(OCR_MODEL_ID, io.BytesIO(image))
    result = poller.result()
    logger.info("OCR for page %d took %.1fs", page.number + 1, time.time() - t0)

    return result.content or ""
