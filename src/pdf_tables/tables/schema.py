"""Pydantic models for positioned text fragments and reconstructed tables.

``Fragment`` is what the text-layer extractor hands to the line
reconstructor.  ``Table`` is the normalized output grid; its model_validator
guarantees that every row has exactly as many cells as the header, so any
code that builds a ragged grid by hand fails loudly instead of rendering a
broken table.
"""

from pydantic import BaseModel, ConfigDict, model_validator


class Fragment(BaseModel):
    """A single positioned piece of text from a page's native text layer.

    Coordinates are in PDF user space: larger ``y`` is nearer the top of the
    page.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    x: float
    y: float


class TokenLine(BaseModel):
    """A reconstructed line together with its whitespace-delimited tokens."""

    text: str
    tokens: list[str]


class Table(BaseModel):
    """Rectangular grid of cell strings; row 0 is the header."""

    rows: list[list[str]]

    @model_validator(mode="after")
    def validate_row_widths(self) -> "Table":
        """Ensure there is a header plus data and every row matches the header width."""
        if len(self.rows) < 2:
            raise ValueError(f"Table needs a header and at least one data row, got {len(self.rows)} row(s)")
        n_cols = len(self.rows[0])
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching header)")
        return self

    @property
    def header(self) -> list[str]:
        return self.rows[0]

    @property
    def data_rows(self) -> list[list[str]]:
        return self.rows[1:]

    @property
    def column_count(self) -> int:
        return len(self.rows[0])
