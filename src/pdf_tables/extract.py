"""Extract tables from a PDF and write them as markdown or a printable HTML page.

Usage:
    python -m pdf_tables.extract report.pdf                          # markdown to stdout
    python -m pdf_tables.extract report.pdf --format html -o out.html
    python -m pdf_tables.extract scan.pdf --dpi 300                  # OCR render resolution
"""

import argparse
import logging
import sys
from pathlib import Path

from pdf_tables.config import OCR_DPI
from pdf_tables.tables.formatting import render_html_document, render_markdown_document, render_status
from pdf_tables.tables.pipeline import extract_tables_from_pdf

logger = logging.getLogger(__name__)

FAILURE_STATUS = "Error processing PDF. Check the log for details."


def main(argv: list[str] | None = None) -> int:
    """Run extraction on one PDF; return the process exit code."""
    parser = argparse.ArgumentParser(description="Detect and reconstruct tables in a PDF")
    parser.add_argument("pdf", type=Path, help="PDF file to process")
    parser.add_argument("--format", choices=["markdown", "html"], default="markdown", help="Output format (default: markdown)")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write output here instead of stdout")
    parser.add_argument("--dpi", type=int, default=OCR_DPI, help=f"Render resolution for OCR pages (default: {OCR_DPI})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    try:
        tables = extract_tables_from_pdf(args.pdf, dpi=args.dpi)
    except Exception:  # pylint: disable=broad-exception-caught
        logger.exception("Failed to extract tables from %s", args.pdf)
        print(FAILURE_STATUS, file=sys.stderr)
        return 1

    if tables:
        rendered = render_html_document(tables) if args.format == "html" else render_markdown_document(tables)
        if args.output is not None:
            args.output.write_text(rendered, encoding="utf-8")
            logger.info("Wrote %d table(s) to %s", len(tables), args.output)
        else:
            print(rendered)

    print(render_status(tables), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
