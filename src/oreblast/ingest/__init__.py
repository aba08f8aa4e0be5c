"""Tabular ingestion — delimited text to validated rows.

Uses only Python stdlib (csv) for parsing.
"""

from oreblast.ingest.rows import OreRow, ParseReport, parse_rows
from oreblast.ingest.schema import ColumnMap, FIELD_PATTERNS, resolve_columns

__all__ = ["ColumnMap", "FIELD_PATTERNS", "OreRow", "ParseReport", "parse_rows", "resolve_columns"]
