"""Line reconstruction from positioned text fragments.

A page's text layer arrives as loose fragments with (x, y) positions.  Lines
are rebuilt by bucketing fragments on their rounded y coordinate, which is a
cheap stand-in for real line detection: fragments whose y values round to
different integers end up on separate lines even if they are visually on the
same baseline.
"""

import logging
import math
from collections.abc import Iterable

from pdf_tables.tables.patterns import WHITESPACE_RE
from pdf_tables.tables.schema import Fragment, TokenLine

logger = logging.getLogger(__name__)


def _bucket_key(y: float) -> int:
    """Round half up (100.5 -> 101), not half to even."""
    return math.floor(y + 0.5)


def group_fragments_into_lines(fragments: Iterable[Fragment]) -> list[str]:
    """Return the page's non-empty lines of text, top of page first."""
    buckets: dict[int, list[Fragment]] = {}
    for fragment in fragments:
        buckets.setdefault(_bucket_key(fragment.y), []).append(fragment)

    lines: list[str] = []
    for key in sorted(buckets, reverse=True):
        parts = sorted(buckets[key], key=lambda frag: frag.x)
        line = " ".join(text for text in (frag.text.strip() for frag in parts) if text)
        if line.strip():
            lines.append(line)

    logger.debug("Grouped fragments into %d lines from %d buckets", len(lines), len(buckets))
    return lines


def tokenize_line(line: str) -> TokenLine:
    """Split a line on whitespace, dropping empty tokens."""
    return TokenLine(text=line, tokens=[tok for tok in WHITESPACE_RE.split(line.strip()) if tok])


def tokenize_lines(lines: Iterable[str]) -> list[TokenLine]:
    return [tokenize_line(line) for line in lines]
