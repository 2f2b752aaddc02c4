"""Reconstruct tables from PDF pages with no explicit table markup."""
