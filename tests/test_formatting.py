"""Unit tests for markdown, HTML and status rendering."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from pdf_tables.tables.formatting import (
    render_html_document,
    render_markdown,
    render_markdown_document,
    render_status,
)
from pdf_tables.tables.schema import Table

PEOPLE = Table(rows=[["Name", "Age"], ["Alice", "30"], ["Bob", "25"]])


class TestRenderMarkdown:

    def test_basic_table(self):
        assert render_markdown(PEOPLE) == "\n".join(
            [
                "| Name | Age |",
                "| --- | --- |",
                "| Alice | 30 |",
                "| Bob | 25 |",
            ]
        )

    def test_title(self):
        assert render_markdown(PEOPLE, title="Table 1").startswith("**Table 1**\n\n| Name | Age |")

    def test_pipe_in_cell_escaped(self):
        table = Table(rows=[["A", "B"], ["x|y", "z"]])
        assert "| x\\|y | z |" in render_markdown(table)

    def test_empty_cells_kept(self):
        table = Table(rows=[["A", "B", "C"], ["1.", "Bob", ""]])
        assert render_markdown(table).splitlines()[-1] == "| 1. | Bob |  |"

    def test_document_numbers_tables(self):
        doc = render_markdown_document([PEOPLE, PEOPLE])
        assert "**Table 1**" in doc
        assert "**Table 2**" in doc


class TestRenderHtmlDocument:

    def test_standalone_document(self):
        doc = render_html_document([PEOPLE])
        assert doc.startswith("<!DOCTYPE html>")
        assert "<title>Extracted Tables</title>" in doc
        assert "<h3>Table 1</h3>" in doc

    def test_header_uses_th(self):
        doc = render_html_document([PEOPLE])
        assert "<tr><th>Name</th><th>Age</th></tr>" in doc
        assert "<tr><td>Alice</td><td>30</td></tr>" in doc

    def test_cells_escaped(self):
        table = Table(rows=[["A", "B"], ["<script>", "a & b"]])
        doc = render_html_document([table])
        assert "<script>" not in doc
        assert "&lt;script&gt;" in doc
        assert "a &amp; b" in doc

    def test_one_section_per_table(self):
        doc = render_html_document([PEOPLE, PEOPLE, PEOPLE])
        assert doc.count('class="table-wrapper"') == 3


class TestRenderStatus:

    def test_no_tables(self):
        assert render_status([]) == "Done. No clear tables were found."

    def test_count(self):
        assert render_status([PEOPLE, PEOPLE]) == "Done. Detected 2 table(s)."
