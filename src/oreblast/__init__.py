"""oreblast — blast-damage simulation over a CSV-described grid of ore blocks.

Core entry points:

    build_grid_from_text(text) -> Grid
    apply_blast(grid, center_x, center_y, radius, power) -> BlastResult
    compute_stats(grid) -> GridStatistics
    reset_grid(grid) -> Grid
    get_block_at(grid, x, y) -> Block | None
"""

from oreblast.blast import BlastHit, BlastResult, apply_blast, falloff
from oreblast.exceptions import (
    EmptyDatasetError,
    GridNotLoadedError,
    OreBlastError,
    SchemaError,
    SourceError,
)
from oreblast.grid import Block, Grid, GridSnapshot, build_grid_from_text, get_block_at, reset_grid
from oreblast.session import BlastParams, GridSession
from oreblast.stats import GridStatistics, compute_stats

__all__ = [
    "BlastHit",
    "BlastParams",
    "BlastResult",
    "Block",
    "EmptyDatasetError",
    "Grid",
    "GridNotLoadedError",
    "GridSession",
    "GridSnapshot",
    "GridStatistics",
    "OreBlastError",
    "SchemaError",
    "SourceError",
    "apply_blast",
    "build_grid_from_text",
    "compute_stats",
    "falloff",
    "get_block_at",
    "reset_grid",
]
