"""Table reconstruction from positioned PDF text and OCR text.

Submodules:
  patterns       -- compiled regex patterns and thresholds
  schema         -- Fragment / TokenLine / Table Pydantic models
  lines          -- fragment-to-line reconstruction and tokenizing
  detection      -- table region detection over page lines
  normalization  -- header/data-row column-count normalization
  records        -- fixed internship-record extraction from OCR text
  formatting     -- markdown and HTML rendering
  pipeline       -- per-page and per-document extraction entry points
"""
