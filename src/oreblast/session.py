"""GridSession — owns the current grid and its blast history.

A host (UI, script, notebook) loads a dataset, fires blasts, and asks for
statistics through one session.  The session holds the only reference to the
authoritative Grid; statistics and lookups are computed on demand.

Lifecycle::

    load_text() / load_file() -> blast() ... -> reset() | replay()

``replay()`` rebuilds the grid from its snapshot and re-applies every
recorded blast in order.  Because ingestion and blasts are deterministic the
replayed grid ends in the same state as before.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from oreblast.blast.engine import apply_blast
from oreblast.blast.result import BlastResult
from oreblast.config import settings
from oreblast.exceptions import GridNotLoadedError, SourceError
from oreblast.grid.block import Block
from oreblast.grid.builder import build_grid_from_text, reset_grid
from oreblast.grid.grid import Grid
from oreblast.stats import GridStatistics, compute_stats


@dataclass(frozen=True)
class BlastParams:
    """Recorded arguments of one blast."""

    center_x: int
    center_y: int
    radius: int
    power: float


class GridSession:
    """Single source of truth for one loaded dataset."""

    def __init__(self) -> None:
        self._grid: Grid | None = None
        self._history: list[BlastParams] = []
        self._source: str = ""

    @property
    def is_ready(self) -> bool:
        return self._grid is not None

    @property
    def grid(self) -> Grid:
        if self._grid is None:
            raise GridNotLoadedError("No grid loaded")
        return self._grid

    @property
    def history(self) -> list[BlastParams]:
        return list(self._history)

    @property
    def source(self) -> str:
        """Where the current dataset came from ("text" or a file path)."""
        return self._source

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_text(self, text: str) -> Grid:
        """Build a grid from *text* and make it current.

        On failure the previous grid (if any) stays loaded.

        Raises:
            SchemaError: If required columns are missing.
            EmptyDatasetError: If no valid rows survive parsing.
        """
        grid = build_grid_from_text(text)
        self._set_grid(grid, "text")
        return grid

    def load_file(self, path: str | Path) -> Grid:
        """Read a CSV file and make its grid current.

        Raises:
            SourceError: If the file has the wrong extension, is too large,
                or cannot be read as UTF-8 text.
            SchemaError: If required columns are missing.
            EmptyDatasetError: If no valid rows survive parsing.
        """
        path = Path(path)
        if path.suffix.lower() not in settings.source_extensions:
            raise SourceError(
                f"Unsupported file type '{path.suffix}' for {path};"
                f" expected one of {', '.join(settings.source_extensions)}"
            )

        try:
            size = path.stat().st_size
            if size > settings.max_source_bytes:
                raise SourceError(
                    f"File {path} is {size} bytes; limit is {settings.max_source_bytes}"
                )
            text = path.read_text(encoding="utf-8-sig")
        except SourceError:
            raise
        except Exception as e:
            raise SourceError(f"Failed to read {path}: {e}") from e

        grid = build_grid_from_text(text)
        self._set_grid(grid, str(path))
        return grid

    def _set_grid(self, grid: Grid, source: str) -> None:
        self._grid = grid
        self._history.clear()
        self._source = source
        logger.info(f"Session loaded grid from {source}: {len(grid)} blocks")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def blast(self, center_x: int, center_y: int, radius: int, power: float) -> BlastResult:
        """Apply a blast to the current grid and record it."""
        result = apply_blast(self.grid, center_x, center_y, radius, power)
        self._history.append(BlastParams(center_x, center_y, radius, power))
        return result

    def reset(self) -> Grid:
        """Restore the pristine grid and clear the blast history."""
        self._grid = reset_grid(self.grid)
        self._history.clear()
        return self._grid

    def replay(self) -> list[BlastResult]:
        """Rebuild the grid and re-apply every recorded blast in order."""
        history = list(self._history)
        self._grid = reset_grid(self.grid)
        results = [
            apply_blast(self._grid, p.center_x, p.center_y, p.radius, p.power)
            for p in history
        ]
        logger.info(f"Replayed {len(results)} blast(s)")
        return results

    def stats(self) -> GridStatistics:
        return compute_stats(self.grid)

    def block_at(self, x: int, y: int) -> Block | None:
        return self.grid.get_block(x, y)
