"""Block — a single material-bearing grid cell with its own durability."""

from __future__ import annotations

from dataclasses import dataclass, field

from oreblast.grid.materials import HEALTH_PER_HARDNESS


@dataclass
class Block:
    """One populated grid cell.

    ``health`` and ``destroyed`` are derived from ``max_health`` and the
    accumulated ``damage``; they only change through ``apply_damage``.

    Attributes:
        x: Column (zero-based).
        y: Row (zero-based).
        material: Material identifier as read from the source.
        hardness: Positive toughness rating; basis for max_health.
        value: Non-negative economic value.
        blast_resistance: Fraction of incoming damage absorbed, in [0, 1].
        max_health: Health at zero damage.
    """

    x: int
    y: int
    material: str
    hardness: int
    value: int
    blast_resistance: float = 0.0
    max_health: float = 0.0
    damage: float = field(default=0.0, init=False)
    health: float = field(default=0.0, init=False)
    destroyed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.hardness <= 0:
            raise ValueError("hardness must be > 0")
        if self.value < 0:
            raise ValueError("value must be >= 0")
        if not 0.0 <= self.blast_resistance <= 1.0:
            raise ValueError("blast_resistance must be in [0, 1]")
        if self.max_health < 0:
            raise ValueError("max_health must be >= 0")
        if self.max_health == 0:
            self.max_health = self.hardness * HEALTH_PER_HARDNESS
        self.health = self.max_health

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def health_ratio(self) -> float:
        """Remaining health as a fraction of max health (0.0 to 1.0)."""
        return self.health / self.max_health

    def apply_damage(self, amount: float) -> bool:
        """Accumulate *amount* of damage.

        Returns True only on the call that takes the block from alive to
        destroyed.  Damage to an already-destroyed block is ignored.

        Raises:
            ValueError: If amount is negative.
        """
        if amount < 0:
            raise ValueError("damage amount must be >= 0")
        if self.destroyed:
            return False
        self.damage += amount
        self.health = max(0.0, self.max_health - self.damage)
        self.destroyed = self.health <= 0
        return self.destroyed

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "material": self.material,
            "hardness": self.hardness,
            "value": self.value,
            "blast_resistance": self.blast_resistance,
            "max_health": self.max_health,
            "health": self.health,
            "damage": self.damage,
            "destroyed": self.destroyed,
        }
