"""Grid statistics — survival, dilution and per-material distribution.

Statistics are always recomputed from the grid; nothing here is cached.
Percentages round half up (12.5 -> 13).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from oreblast.grid.grid import Grid

# (threshold, grade) pairs, checked in order.
_RECOVERY_GRADES: list[tuple[int, str]] = [
    (90, "excellent"),
    (70, "good"),
    (50, "average"),
]
_DILUTION_GRADES: list[tuple[int, str]] = [
    (5, "excellent"),
    (15, "good"),
    (25, "average"),
]


@dataclass
class GridStatistics:
    """Snapshot of grid state for the presentation layer."""

    total_blocks: int
    destroyed_blocks: int
    survival_rate: int
    material_distribution: dict[str, int] = field(default_factory=dict)
    total_value: int = 0
    recovered_value: int = 0

    @property
    def surviving_blocks(self) -> int:
        return self.total_blocks - self.destroyed_blocks

    @property
    def dilution_rate(self) -> int:
        """Percentage of blocks destroyed; 0 for an empty grid."""
        if self.total_blocks == 0:
            return 0
        return 100 - self.survival_rate

    def to_dict(self) -> dict:
        return {
            "total_blocks": self.total_blocks,
            "destroyed_blocks": self.destroyed_blocks,
            "survival_rate": self.survival_rate,
            "dilution_rate": self.dilution_rate,
            "material_distribution": dict(self.material_distribution),
            "total_value": self.total_value,
            "recovered_value": self.recovered_value,
            "recovery_grade": grade_recovery(self.survival_rate),
            "dilution_grade": grade_dilution(self.dilution_rate),
        }


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def compute_stats(grid: Grid) -> GridStatistics:
    total = 0
    destroyed = 0
    total_value = 0
    recovered_value = 0
    distribution: dict[str, int] = {}

    for block in grid:
        total += 1
        total_value += block.value
        if block.destroyed:
            destroyed += 1
            continue
        recovered_value += block.value
        distribution[block.material] = distribution.get(block.material, 0) + 1

    survival = _round_half_up((total - destroyed) / total * 100) if total else 0

    return GridStatistics(
        total_blocks=total,
        destroyed_blocks=destroyed,
        survival_rate=survival,
        material_distribution=distribution,
        total_value=total_value,
        recovered_value=recovered_value,
    )


def grade_recovery(rate: float) -> str:
    """Grade a mineral recovery (survival) percentage; higher is better."""
    for threshold, grade in _RECOVERY_GRADES:
        if rate >= threshold:
            return grade
    return "poor"


def grade_dilution(rate: float) -> str:
    """Grade a dilution percentage; lower is better."""
    for threshold, grade in _DILUTION_GRADES:
        if rate <= threshold:
            return grade
    return "poor"
