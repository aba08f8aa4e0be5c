"""Blast engine — circular, linearly attenuated area damage.

For a blast at ``(cx, cy)`` with ``radius`` r and ``power`` P, every
populated, not-yet-destroyed block within the clipped bounding square is
measured by Euclidean distance d.  Blocks with d > r are outside the
footprint.  Damage is::

    P * max(0, 1 - d / r) * (1 - blast_resistance)

A block at exactly d == r is inside the footprint (reported as affected) but
receives zero damage.  Blasts centered off-grid, or with r <= 0, are no-ops.
"""

from __future__ import annotations

import math

from loguru import logger

from oreblast.blast.result import BlastHit, BlastResult
from oreblast.grid.grid import Grid


def falloff(distance: float, radius: float) -> float:
    """Linear attenuation from 1.0 at the center to 0.0 at *radius*.

    A zero radius yields 1.0 at distance 0 and 0.0 elsewhere.
    """
    if radius <= 0:
        return 1.0 if distance == 0 else 0.0
    return max(0.0, 1.0 - distance / radius)


def blast_damage(power: float, distance: float, radius: float, blast_resistance: float) -> float:
    """Damage a block with *blast_resistance* takes at *distance* from the center."""
    return power * falloff(distance, radius) * (1.0 - blast_resistance)


def apply_blast(grid: Grid, center_x: int, center_y: int, radius: int, power: float) -> BlastResult:
    """Apply one blast to *grid* in place.

    Args:
        grid: Target grid; its blocks are mutated.
        center_x: Blast center column.
        center_y: Blast center row.
        radius: Blast radius in cells.
        power: Damage at the center before resistance.

    Returns:
        BlastResult listing every affected block and those destroyed by
        this call.

    Raises:
        ValueError: If power is negative.
    """
    if power < 0:
        raise ValueError("power must be >= 0")

    result = BlastResult(center=(center_x, center_y), radius=radius, power=power)
    if radius <= 0 or not grid.in_bounds(center_x, center_y):
        logger.debug(
            f"Blast at ({center_x}, {center_y}) r={radius} is a no-op"
            f" on {grid.width}x{grid.height} grid"
        )
        return result

    y_min = max(0, center_y - radius)
    y_max = min(grid.height - 1, center_y + radius)
    x_min = max(0, center_x - radius)
    x_max = min(grid.width - 1, center_x + radius)

    for y in range(y_min, y_max + 1):
        for x in range(x_min, x_max + 1):
            block = grid.get_block(x, y)
            if block is None or block.destroyed:
                continue

            distance = math.hypot(x - center_x, y - center_y)
            if distance > radius:
                continue

            damage = blast_damage(power, distance, radius, block.blast_resistance)
            result.hits.append(BlastHit(block=block, distance=distance, damage=damage))
            if block.apply_damage(damage):
                result.destroyed.append(block)

    logger.debug(
        f"Blast at ({center_x}, {center_y}) r={radius} p={power}:"
        f" {len(result.hits)} affected, {len(result.destroyed)} destroyed"
    )
    return result
