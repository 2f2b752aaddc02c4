"""Shared configuration for the PDF table extraction pipeline."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Scanned pages are rendered at 2x the 72 dpi page size before OCR
DEFAULT_OCR_DPI = 144
OCR_DPI_ENV = "PDF_TABLES_OCR_DPI"


def read_ocr_dpi() -> int:
    """Return the OCR render DPI from the environment, or the default if unset or invalid."""
    raw = os.getenv(OCR_DPI_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_OCR_DPI
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %d", OCR_DPI_ENV, raw, DEFAULT_OCR_DPI)
        return DEFAULT_OCR_DPI
    if value <= 0:
        logger.warning("Ignoring %s=%d (must be positive); using %d", OCR_DPI_ENV, value, DEFAULT_OCR_DPI)
        return DEFAULT_OCR_DPI
    return value


OCR_DPI = read_ocr_dpi()

# Azure AI Document Intelligence model used for plain text recognition
OCR_MODEL_ID = "prebuilt-read"

AZURE_KEY_ENV = "AZURE_DOCUMENT_INTELLIGENCE_KEY"
AZURE_ENDPOINT_ENV = "DOCUMENT_INTELLIGENCE_ENDPOINT_URL"
