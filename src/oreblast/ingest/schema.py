"""Fuzzy header resolution — maps variant column names onto canonical fields.

Headers are matched case-insensitively by substring against the patterns in
``FIELD_PATTERNS``.  Resolution runs in two passes:

  1. Exact matches: a header equal to a field name or one of its patterns
     (``x``, ``y``, ``material``, ``ore``, ``type``, ``hardness``, ``value``).
  2. Substring matches, in ``RESOLUTION_ORDER``.  The multi-letter fields
     claim columns before ``x`` and ``y`` so that headers such as
     ``ore_type`` or ``density`` are not captured by the one-letter rules.

A column is claimed by at most one field.  Within a field the left-most
candidate wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from oreblast.exceptions import SchemaError

# Canonical field -> substrings that identify it in a header.
FIELD_PATTERNS: dict[str, tuple[str, ...]] = {
    "x": ("x",),
    "y": ("y",),
    "material": ("ore", "material", "type"),
    "hardness": ("hardness",),
    "value": ("value",),
}

REQUIRED_FIELDS: tuple[str, ...] = ("x", "y", "material")

RESOLUTION_ORDER: tuple[str, ...] = ("material", "hardness", "value", "x", "y")


@dataclass(frozen=True)
class ColumnMap:
    """Column indices for each canonical field (None when absent)."""

    x: int
    y: int
    material: int
    hardness: int | None = None
    value: int | None = None

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "material": self.material,
            "hardness": self.hardness,
            "value": self.value,
        }


def normalize_header(name: str) -> str:
    """Lower-case and strip a header cell (including a UTF-8 BOM)."""
    return name.strip().lstrip("\ufeff").strip().lower()


def match_candidates(field: str, headers: list[str]) -> list[int]:
    """Return indices of headers whose normalized name contains a pattern for *field*."""
    patterns = FIELD_PATTERNS[field]
    return [
        i for i, h in enumerate(headers)
        if any(p in normalize_header(h) for p in patterns)
    ]


def resolve_columns(headers: list[str]) -> ColumnMap:
    """Resolve canonical fields to header column indices.

    Args:
        headers: Raw header cells in file order.

    Returns:
        ColumnMap with indices for every resolvable field.

    Raises:
        SchemaError: If x, y or material cannot be resolved.
    """
    normalized = [normalize_header(h) for h in headers]
    claimed: dict[str, int] = {}
    taken: set[int] = set()

    # Pass 1: exact names
    for field in RESOLUTION_ORDER:
        names = (field,) + FIELD_PATTERNS[field]
        for i, h in enumerate(normalized):
            if i not in taken and h in names:
                claimed[field] = i
                taken.add(i)
                break

    # Pass 2: substring matches over the remaining columns
    for field in RESOLUTION_ORDER:
        if field in claimed:
            continue
        for i in match_candidates(field, headers):
            if i not in taken:
                claimed[field] = i
                taken.add(i)
                break

    missing = [f for f in REQUIRED_FIELDS if f not in claimed]
    if missing:
        raise SchemaError(missing, [h.strip() for h in headers if h.strip()])

    return ColumnMap(
        x=claimed["x"],
        y=claimed["y"],
        material=claimed["material"],
        hardness=claimed.get("hardness"),
        value=claimed.get("value"),
    )
