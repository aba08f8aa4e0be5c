"""BlastHit and BlastResult — the transient outcome of one blast."""

from __future__ import annotations

from dataclasses import dataclass, field

from oreblast.grid.block import Block


@dataclass(frozen=True)
class BlastHit:
    """One block touched by a blast.

    Attributes:
        block: The affected block (live reference into the grid).
        distance: Euclidean distance from the blast center, in cells.
        damage: Damage dealt to the block by this blast.
    """

    block: Block
    distance: float
    damage: float

    def to_dict(self) -> dict:
        return {
            "x": self.block.x,
            "y": self.block.y,
            "material": self.block.material,
            "distance": self.distance,
            "damage": self.damage,
            "destroyed": self.block.destroyed,
        }


@dataclass
class BlastResult:
    """Affected and destroyed blocks for a single ``apply_blast`` call.

    ``total_damage`` is the sum of the cumulative damage carried by each
    affected block after the blast, not just this blast's increment.
    """

    center: tuple[int, int]
    radius: int
    power: float
    hits: list[BlastHit] = field(default_factory=list)
    destroyed: list[Block] = field(default_factory=list)

    @property
    def affected(self) -> list[Block]:
        return [h.block for h in self.hits]

    @property
    def total_damage(self) -> float:
        return sum(h.block.damage for h in self.hits)

    @property
    def damage_dealt(self) -> float:
        """Damage added by this blast alone."""
        return sum(h.damage for h in self.hits)

    def to_dict(self) -> dict:
        return {
            "center": {"x": self.center[0], "y": self.center[1]},
            "radius": self.radius,
            "power": self.power,
            "affected": [h.to_dict() for h in self.hits],
            "destroyed": [{"x": b.x, "y": b.y} for b in self.destroyed],
            "total_damage": self.total_damage,
        }
