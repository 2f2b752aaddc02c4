"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from pdf_tables.tables.schema import Fragment

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


def make_fragments(items: list[tuple[str, float, float]]) -> list[Fragment]:
    """Build fragments from a list of (text, x, y) tuples."""
    return [Fragment(text=text, x=x, y=y) for text, x, y in items]


def make_page_fragments(lines: list[str], top: float = 700.0, step: float = 20.0) -> list[Fragment]:
    """Lay out each line's words left to right, one line per ``step`` going down the page."""
    fragments: list[Fragment] = []
    for row, line in enumerate(lines):
        y = top - row * step
        for col, word in enumerate(line.split()):
            fragments.append(Fragment(text=word, x=50.0 + col * 80.0, y=y))
    return fragments


@pytest.fixture
def people_lines() -> list[str]:
    return [
        "Name Age City",
        "Alice 30 Paris",
        "Bob 25 London",
        "Carol 41 Berlin",
    ]
