"""Adapters that pull text out of PDF pages.

Submodules:
  text_layer  -- positioned fragments from the native text layer (PyMuPDF)
  ocr         -- page rendering + Azure Document Intelligence OCR for scanned pages
"""
