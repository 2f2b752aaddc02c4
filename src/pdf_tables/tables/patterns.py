"""Compiled regex patterns and constants for PDF table reconstruction.

These patterns identify the lexical signals the heuristics rely on: row-index
markers that let ragged rows continue a table, and the fixed internship record
layout recognised in OCR text.  Used by detection.py and records.py.
"""

import re

# ─── Detection Thresholds ─────────────────────────────────────────────────────

# A run needs a header plus at least two data rows to count as a table
MIN_TABLE_ROWS = 3

# Header candidates (and continuation rows) need at least this many tokens
MIN_ROW_TOKENS = 2


# ─── Token Patterns ───────────────────────────────────────────────────────────

# Row-index marker such as "1", "12" or "3." at the start of an enumerated row.
# Digits are ASCII only ([0-9], not \d) in every pattern here.
ROW_INDEX_MARKER_RE = re.compile(r"^[0-9]+\.?$")

# Any run of whitespace (used for tokenizing and flattening OCR text)
WHITESPACE_RE = re.compile(r"\s+")


# ─── Header Normalization ─────────────────────────────────────────────────────

# Header tokens this short (after the third cell) are treated as continuations
# of the previous cell, e.g. units or abbreviations like "kg" or "No"
SHORT_HEADER_TOKEN_LEN = 2


# ─── Internship Record (OCR) ──────────────────────────────────────────────────

# ordinal, name, roll number (>= 8 alphanumerics), "DD/MM/YYYY to|- DD/MM/YYYY"
INTERNSHIP_RECORD_RE = re.compile(
    r"([0-9]+)\s+([A-Za-z][A-Za-z .]+?)\s+([0-9A-Z]{8,})\s+"
    r"([0-9]{2}/[0-9]{2}/[0-9]{4})\s*(?:to|-)\s*([0-9]{2}/[0-9]{2}/[0-9]{4})"
)

INTERNSHIP_HEADER = (
    "S.No.",
    "Name of the Student (Mr./Ms.)",
    "College Roll No.",
    "Permitted period of the Internship Training",
)
