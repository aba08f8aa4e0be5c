"""Parse delimited ore-grid text into typed rows.

Uses the stdlib csv module.  The first non-blank line is the header; column
roles are resolved by ``oreblast.ingest.schema``.  Malformed rows are dropped
rather than failing the whole file:

  - fewer fields than the header
  - x or y not an integer, or negative
  - empty material
  - a line the csv module cannot split (unbalanced quote, oversized field)

Hardness and value are optional per row.  A missing, non-numeric or
out-of-range cell yields ``None`` so the grid builder can fall back to the
material table.
"""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass, field

from loguru import logger

from oreblast.config import settings
from oreblast.ingest.schema import ColumnMap, resolve_columns


@dataclass(frozen=True)
class OreRow:
    """A single validated data row."""

    x: int
    y: int
    material: str
    hardness: int | None = None
    value: int | None = None


@dataclass
class ParseReport:
    """Rows accepted from a source text, plus what was dropped.

    Attributes:
        rows: Accepted rows in file order.
        skipped: Number of non-blank data rows that were dropped.
        columns: The resolved column map.
        headers: Header cells as read (stripped).
    """

    rows: list[OreRow]
    skipped: int
    columns: ColumnMap
    headers: list[str] = field(default_factory=list)


_INT_RE = re.compile(r"-?[0-9]+")


def _parse_int(cell: str) -> int | None:
    cell = cell.strip()
    if not _INT_RE.fullmatch(cell):
        return None
    return int(cell)


def _optional_cell(cells: list[str], index: int | None) -> str | None:
    if index is None or index >= len(cells):
        return None
    return cells[index]


def _split_line(line: str, delimiter: str) -> list[str] | None:
    """Split one physical line into cells, or None if it is malformed.

    Each line is parsed on its own so an unbalanced quote or an oversized
    field only costs that line.
    """
    try:
        return next(csv.reader([line], delimiter=delimiter, strict=True), [])
    except csv.Error:
        return None


def parse_rows(text: str, delimiter: str | None = None) -> ParseReport:
    """Parse raw delimited text into an OreRow list.

    Args:
        text: Header row followed by data rows.
        delimiter: Field delimiter; defaults to ``settings.delimiter``.

    Returns:
        ParseReport with the accepted rows and the skipped-row count.

    Raises:
        SchemaError: If the header lacks an x, y or material column
            (including the case of no header at all, or a header line
            that cannot be split).
    """
    delimiter = delimiter or settings.delimiter
    lines = iter(text.splitlines())

    headers: list[str] = []
    for line in lines:
        if line.strip():
            headers = [c.strip() for c in (_split_line(line, delimiter) or [])]
            break

    columns = resolve_columns(headers)
    n_columns = len(headers)

    rows: list[OreRow] = []
    skipped = 0
    for line in lines:
        if not line.strip():
            continue
        cells = _split_line(line, delimiter)
        if cells is None or len(cells) < n_columns:
            skipped += 1
            continue

        x = _parse_int(cells[columns.x])
        y = _parse_int(cells[columns.y])
        material = cells[columns.material].strip()
        if x is None or y is None or x < 0 or y < 0 or not material:
            skipped += 1
            continue

        hardness = _parse_int(_optional_cell(cells, columns.hardness) or "")
        if hardness is not None and hardness <= 0:
            hardness = None
        value = _parse_int(_optional_cell(cells, columns.value) or "")
        if value is not None and value < 0:
            value = None

        rows.append(OreRow(x=x, y=y, material=material, hardness=hardness, value=value))

    if skipped:
        logger.warning(f"Dropped {skipped} malformed row(s); kept {len(rows)}")

    return ParseReport(rows=rows, skipped=skipped, columns=columns, headers=headers)
