"""Column-count normalization of candidate tables.

The header fixes the column count for the whole table.  Data rows that come
out of the detector can be shorter or longer than the header; short rows are
padded, long rows fold their overflow into the second column while the last
columns keep one token each.
"""

from collections.abc import Sequence

from pdf_tables.tables.patterns import SHORT_HEADER_TOKEN_LEN
from pdf_tables.tables.schema import Table


def normalize_header_tokens(tokens: Sequence[str]) -> list[str]:
    """Turn header tokens into header cells.

    The first three tokens always get their own cell.  After that, very short
    tokens (units, abbreviations) are glued onto the previous cell and longer
    ones start a new column.
    """
    cells: list[str] = []
    for token in tokens:
        if len(cells) <= 2:
            cells.append(token)
        elif len(token) <= SHORT_HEADER_TOKEN_LEN:
            cells[-1] = f"{cells[-1]} {token}"
        else:
            cells.append(token)
    return cells


def normalize_data_row(tokens: Sequence[str] | None, column_count: int) -> list[str]:
    """Force a data row to exactly ``column_count`` cells.

    Overflowing rows keep the first token as cell 1 and the last
    ``column_count - 2`` tokens as the trailing cells; everything in between
    is joined into cell 2.
    """
    if not tokens:
        return [""] * column_count

    if len(tokens) == column_count:
        return list(tokens)

    if len(tokens) < column_count:
        return list(tokens) + [""] * (column_count - len(tokens))

    row = [tokens[0]]
    remaining = list(tokens[1:])

    if column_count - 1 <= 1:
        row.append(" ".join(remaining))
    else:
        tail_count = column_count - 2
        middle, tail = remaining[:-tail_count], remaining[-tail_count:]
        row.append(" ".join(middle))
        row.extend(tail)

    # Pad or truncate so the row is exactly column_count wide
    if len(row) < column_count:
        row.extend([""] * (column_count - len(row)))
    return row[:column_count]


def build_normalized_table(rows_tokens: Sequence[Sequence[str]]) -> Table:
    """Normalize a candidate table (row 0 = header tokens) into a rectangular Table."""
    header = normalize_header_tokens(rows_tokens[0])
    column_count = len(header)
    rows = [header] + [normalize_data_row(tokens, column_count) for tokens in rows_tokens[1:]]
    return Table(rows=rows)
