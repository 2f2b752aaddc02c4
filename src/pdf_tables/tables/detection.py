"""Table region detection over reconstructed page lines.

Scans the tokenized lines of a page top to bottom and groups contiguous runs
that look like table rows.  A run starts at any line with at least two tokens
(the presumed header) and keeps extending while each following line either
has the same token count as the header or starts with a row-index marker
such as "3." (enumerated rows are allowed to be ragged).

The scan is a small two-state machine: *seeking header* at cursor ``i`` and
*extending run* at cursor ``j``.  A run shorter than MIN_TABLE_ROWS is
rejected and the scan retries from ``i + 1``, so lines inside a rejected run
get their own chance to be a header.  An accepted run commits the cursor to
its end.

Headers are not checked for any particular shape, so three or more short
prose lines with matching word counts will be reported as a table.
"""

import logging
from collections.abc import Iterable, Sequence

from pdf_tables.tables.lines import tokenize_lines
from pdf_tables.tables.normalization import build_normalized_table
from pdf_tables.tables.patterns import MIN_ROW_TOKENS, MIN_TABLE_ROWS, ROW_INDEX_MARKER_RE
from pdf_tables.tables.schema import Table, TokenLine

logger = logging.getLogger(__name__)


def is_row_index_marker(tokens: Sequence[str]) -> bool:
    """Return True if the row's first token is an index like "7" or "7."."""
    if not tokens:
        return False
    return bool(ROW_INDEX_MARKER_RE.match(tokens[0]))


def _continues_table(tokens: Sequence[str], header_len: int) -> bool:
    """Return True if a line can extend a run whose header has *header_len* tokens."""
    if len(tokens) < MIN_ROW_TOKENS:
        return False
    return len(tokens) == header_len or is_row_index_marker(tokens)


def _extend_run(token_lines: Sequence[TokenLine], start: int) -> int:
    """Return the exclusive end index of the run headed by ``token_lines[start]``."""
    header_len = len(token_lines[start].tokens)
    j = start + 1
    while j < len(token_lines) and _continues_table(token_lines[j].tokens, header_len):
        j += 1
    return j


def find_candidate_tables(token_lines: Sequence[TokenLine]) -> list[list[list[str]]]:
    """Partition tokenized lines into candidate tables (raw token rows, header first)."""
    candidates: list[list[list[str]]] = []
    n = len(token_lines)
    i = 0
    while i < n:
        # Seeking header
        if len(token_lines[i].tokens) < MIN_ROW_TOKENS:
            i += 1
            continue

        # Extending run
        run_end = _extend_run(token_lines, i)
        if run_end - i >= MIN_TABLE_ROWS:
            candidates.append([list(line.tokens) for line in token_lines[i:run_end]])
            logger.debug("Candidate table at lines %d-%d (%d rows)", i, run_end - 1, run_end - i)
            i = run_end
        else:
            i += 1

    return candidates


def detect_tables_from_lines(lines: Iterable[str]) -> list[Table]:
    """Tokenize page lines, find candidate tables and normalize each one."""
    candidates = find_candidate_tables(tokenize_lines(lines))
    return [build_normalized_table(rows_tokens) for rows_tokens in candidates]
