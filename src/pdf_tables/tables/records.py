"""Fixed-layout record extraction for OCR text.

Scanned pages have no text layer, and OCR output loses the column layout, so
the generic line-based detector cannot be used.  Instead a single known
document layout (an internship permission letter listing one student) is
recognised with one regex.  This is deliberately narrow: other layouts
produce no table.
"""

import logging

from pdf_tables.tables.patterns import INTERNSHIP_HEADER, INTERNSHIP_RECORD_RE, WHITESPACE_RE
from pdf_tables.tables.schema import Table

logger = logging.getLogger(__name__)


def detect_internship_record(text: str | None) -> Table | None:
    """Return a header + one-row Table for the first internship record in *text*, or None."""
    if not text or not text.strip():
        return None

    flat = WHITESPACE_RE.sub(" ", text)
    match = INTERNSHIP_RECORD_RE.search(flat)
    if match is None:
        logger.debug("No internship record found in %d chars of OCR text", len(flat))
        return None

    s_no, name, roll, start, end = (group.strip() for group in match.groups())
    return Table(rows=[list(INTERNSHIP_HEADER), [s_no, name, roll, f"{start} to {end}"]])
