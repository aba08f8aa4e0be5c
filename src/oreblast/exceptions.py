"""Exception hierarchy for ingestion, grid and session failures."""

from __future__ import annotations


class OreBlastError(Exception):
    """Base class for all errors raised by oreblast."""


class SchemaError(OreBlastError):
    """Raised when a required column cannot be resolved from the header row."""

    def __init__(self, missing_fields: list[str], found_columns: list[str]) -> None:
        self.missing_fields = list(missing_fields)
        self.found_columns = list(found_columns)
        super().__init__(
            f"Missing required column(s) for {', '.join(self.missing_fields)}; "
            f"found columns: {', '.join(self.found_columns) or '(none)'}"
        )


class EmptyDatasetError(OreBlastError):
    """Raised when no row survives parsing into a valid (x, y, material) triple."""

    def __init__(self, skipped_rows: int = 0) -> None:
        self.skipped_rows = skipped_rows
        super().__init__(f"No valid rows in dataset ({skipped_rows} row(s) skipped)")


class SourceError(OreBlastError):
    """Raised when source text cannot be read from a file."""


class GridNotLoadedError(OreBlastError):
    """Raised when a session operation needs a grid and none is loaded."""
