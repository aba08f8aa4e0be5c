"""Build a Grid from validated rows, and rebuild it from its snapshot."""

from __future__ import annotations

from loguru import logger

from oreblast.config import settings
from oreblast.exceptions import EmptyDatasetError
from oreblast.grid.block import Block
from oreblast.grid.grid import Grid, GridSnapshot
from oreblast.grid.materials import DEFAULT_MATERIAL, material_for
from oreblast.ingest.rows import OreRow, parse_rows


def build_block(row: OreRow, snapshot: GridSnapshot) -> Block:
    """Create a Block for *row*, filling gaps from the material table.

    Row values win; then the material's defaults; unknown materials use the
    snapshot's global fallbacks.
    """
    material = material_for(row.material)
    if material is DEFAULT_MATERIAL:
        hardness = snapshot.default_hardness
        value = snapshot.default_value
    else:
        hardness = material.hardness
        value = material.value

    if row.hardness is not None:
        hardness = row.hardness
    if row.value is not None:
        value = row.value

    return Block(
        x=row.x,
        y=row.y,
        material=row.material,
        hardness=hardness,
        value=value,
        blast_resistance=material.blast_resistance,
        max_health=hardness * snapshot.health_multiplier,
    )


def build_grid(rows: list[OreRow], snapshot: GridSnapshot, skipped_rows: int = 0) -> Grid:
    """Lay out *rows* on a grid sized to the largest observed coordinates.

    Later rows overwrite earlier rows at the same coordinates.

    Raises:
        EmptyDatasetError: If *rows* is empty.
    """
    if not rows:
        raise EmptyDatasetError(skipped_rows)

    width = max(r.x for r in rows) + 1
    height = max(r.y for r in rows) + 1
    grid = Grid(width, height, snapshot=snapshot, skipped_rows=skipped_rows)
    for row in rows:
        grid.set_block(build_block(row, snapshot))
    return grid


def _build_from_snapshot(snapshot: GridSnapshot) -> Grid:
    report = parse_rows(snapshot.text, delimiter=snapshot.delimiter)
    return build_grid(report.rows, snapshot, skipped_rows=report.skipped)


def build_grid_from_text(
    text: str,
    *,
    delimiter: str | None = None,
    default_hardness: int | None = None,
    default_value: int | None = None,
    health_multiplier: float | None = None,
) -> Grid:
    """Parse *text* and build a Grid.

    Options left as None come from ``oreblast.config.settings``.  They are
    recorded on the grid's snapshot so ``reset_grid`` reproduces the same
    grid even if settings change later.

    Raises:
        ValueError: If health_multiplier is not positive.
        SchemaError: If x, y or material columns cannot be resolved.
        EmptyDatasetError: If no valid row survives parsing.
    """
    if health_multiplier is not None and health_multiplier <= 0:
        raise ValueError("health_multiplier must be > 0")
    snapshot = GridSnapshot(
        text=text,
        delimiter=delimiter or settings.delimiter,
        default_hardness=(
            settings.default_hardness if default_hardness is None else default_hardness
        ),
        default_value=settings.default_value if default_value is None else default_value,
        health_multiplier=(
            settings.health_multiplier if health_multiplier is None else health_multiplier
        ),
    )
    grid = _build_from_snapshot(snapshot)
    logger.info(
        f"Grid built: {grid.width}x{grid.height}, {len(grid)} blocks"
        f" ({grid.skipped_rows} row(s) skipped)"
    )
    return grid


def reset_grid(grid: Grid) -> Grid:
    """Return a fresh Grid rebuilt from *grid*'s snapshot.

    The input grid is left untouched.

    Raises:
        ValueError: If *grid* was not built from text and has no snapshot.
    """
    if grid.snapshot is None:
        raise ValueError("Grid has no snapshot to reset from")
    fresh = _build_from_snapshot(grid.snapshot)
    logger.debug(f"Grid reset: {len(fresh)} blocks restored")
    return fresh
