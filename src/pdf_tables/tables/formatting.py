"""Markdown and HTML rendering of reconstructed tables.

Markdown output is meant for logs and downstream text pipelines.  The HTML
output is a standalone, print-friendly page listing every table with its
header row styled apart from the data rows.
"""

import html

from pdf_tables.tables.schema import Table

# ─── Markdown Rendering ──────────────────────────────────────────────────────


def _escape_markdown_cell(cell: str) -> str:
    return cell.replace("|", "\\|")


def render_markdown(table: Table, title: str | None = None) -> str:
    """Convert a Table into a markdown table string, optionally preceded by a bold title."""
    lines: list[str] = []
    if title:
        lines.extend([f"**{title}**", ""])

    # Header row + separator
    lines.append("| " + " | ".join(_escape_markdown_cell(cell) for cell in table.header) + " |")
    lines.append("| " + " | ".join(["---"] * table.column_count) + " |")

    for row in table.data_rows:
        lines.append("| " + " | ".join(_escape_markdown_cell(cell) for cell in row) + " |")

    return "\n".join(lines)


def render_markdown_document(tables: list[Table]) -> str:
    """Render every table as markdown, numbered in document order."""
    return "\n\n".join(render_markdown(table, title=f"Table {i}") for i, table in enumerate(tables, start=1))


# ─── HTML Rendering ──────────────────────────────────────────────────────────

_HTML_STYLE = """\
    body { font-family: Arial, sans-serif; padding: 20px; background: #f5f5f5; }
    h2 { margin-bottom: 20px; }
    .table-wrapper {
      margin-bottom: 24px;
      padding: 12px;
      background: #ffffff;
      border-radius: 8px;
      box-shadow: 0 1px 4px rgba(0,0,0,0.08);
      overflow-x: auto;
    }
    table { border-collapse: collapse; width: 100%; margin-top: 10px; }
    th, td {
      border: 1px solid #ccc;
      padding: 6px 10px;
      text-align: left;
      white-space: nowrap;
      font-size: 14px;
    }
    th { background: #e3f2fd; font-weight: bold; }
    tr:nth-child(even) td { background: #f9f9f9; }
"""


def _render_html_table(table: Table) -> str:
    """Render one table as an HTML <table>; the header row uses <th> cells."""
    rows: list[str] = []
    for r_index, row in enumerate(table.rows):
        tag = "th" if r_index == 0 else "td"
        cells = "".join(f"<{tag}>{html.escape(cell)}</{tag}>" for cell in row)
        rows.append(f"<tr>{cells}</tr>")
    return "<table>" + "".join(rows) + "</table>"


def render_html_document(tables: list[Table]) -> str:
    """Serialize tables into a standalone printable HTML page."""
    sections = [
        f'<div class="table-wrapper"><h3>Table {i}</h3>{_render_html_table(table)}</div>'
        for i, table in enumerate(tables, start=1)
    ]
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        "<title>Extracted Tables</title>\n"
        f"<style>\n{_HTML_STYLE}</style>\n"
        "</head>\n<body>\n"
        "<h2>Extracted Tables</h2>\n" + "\n".join(sections) + "\n</body>\n</html>\n"
    )


# ─── Status ──────────────────────────────────────────────────────────────────


def render_status(tables: list[Table]) -> str:
    """One-line summary of a finished extraction."""
    if not tables:
        return "Done. No clear tables were found."
    return f"Done. Detected {len(tables)} table(s)."
