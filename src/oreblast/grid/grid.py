"""Grid — sparse, bounded 2-D map of coordinates to Blocks.

Cells without a Block are empty, which is distinct from a destroyed Block.
Each grid keeps a frozen ``GridSnapshot`` of the text and options it was
built from so ``reset_grid`` can rebuild it from scratch.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from oreblast.grid.block import Block


@dataclass(frozen=True)
class GridSnapshot:
    """Immutable construction data for a grid.

    Attributes:
        text: The raw source text.
        delimiter: Field delimiter used to parse ``text``.
        default_hardness: Fallback hardness for unknown materials.
        default_value: Fallback value for unknown materials.
        health_multiplier: max_health per unit of hardness.
    """

    text: str
    delimiter: str = ","
    default_hardness: int = 100
    default_value: int = 10
    health_multiplier: float = 1.0


class Grid:
    """Bounded sparse grid of Blocks keyed by ``(x, y)``."""

    def __init__(
        self,
        width: int,
        height: int,
        snapshot: GridSnapshot | None = None,
        skipped_rows: int = 0,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("width/height must be >= 0")
        self.width = width
        self.height = height
        self.snapshot = snapshot
        self.skipped_rows = skipped_rows
        self._blocks: dict[tuple[int, int], Block] = {}

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks.values())

    def __contains__(self, pos: object) -> bool:
        return pos in self._blocks

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_block(self, block: Block) -> None:
        """Place *block* at its own coordinates, replacing any existing block.

        Raises:
            ValueError: If the block lies outside the grid.
        """
        if not self.in_bounds(block.x, block.y):
            raise ValueError(
                f"Block ({block.x}, {block.y}) outside {self.width}x{self.height} grid"
            )
        self._blocks[(block.x, block.y)] = block

    def get_block(self, x: int, y: int) -> Block | None:
        return self._blocks.get((x, y))

    def blocks(self) -> list[Block]:
        """All blocks in insertion order."""
        return list(self._blocks.values())

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "skipped_rows": self.skipped_rows,
            "blocks": [b.to_dict() for b in self._blocks.values()],
        }


def get_block_at(grid: Grid, x: int, y: int) -> Block | None:
    """Return the block at ``(x, y)`` or None for an empty / out-of-range cell."""
    return grid.get_block(x, y)
