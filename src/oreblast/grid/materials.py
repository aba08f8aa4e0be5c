"""Static material table — default hardness, value and blast resistance.

Lookups are case-insensitive.  Unknown materials resolve to
``DEFAULT_MATERIAL`` instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass

# Max health per unit of hardness.
HEALTH_PER_HARDNESS = 1.0


@dataclass(frozen=True)
class Material:
    """Default attributes for one material type.

    Attributes:
        name: Canonical (lower-case) identifier.
        hardness: Default hardness when a row supplies none.
        value: Default economic value when a row supplies none.
        blast_resistance: Fraction of incoming blast damage absorbed, in [0, 1].
    """

    name: str
    hardness: int
    value: int
    blast_resistance: float

    def __post_init__(self) -> None:
        if self.hardness <= 0:
            raise ValueError(f"{self.name}: hardness must be > 0")
        if self.value < 0:
            raise ValueError(f"{self.name}: value must be >= 0")
        if not 0.0 <= self.blast_resistance <= 1.0:
            raise ValueError(f"{self.name}: blast_resistance must be in [0, 1]")


DEFAULT_MATERIAL = Material("default", hardness=100, value=10, blast_resistance=0.0)

MATERIALS: dict[str, Material] = {
    m.name: m
    for m in (
        # Host rock
        Material("stone", hardness=100, value=1, blast_resistance=0.10),
        Material("rock", hardness=100, value=1, blast_resistance=0.10),
        Material("granite", hardness=150, value=2, blast_resistance=0.25),
        Material("limestone", hardness=80, value=2, blast_resistance=0.05),
        # Ores
        Material("coal", hardness=60, value=5, blast_resistance=0.00),
        Material("iron", hardness=150, value=20, blast_resistance=0.20),
        Material("copper", hardness=120, value=25, blast_resistance=0.15),
        Material("silver", hardness=140, value=40, blast_resistance=0.20),
        Material("gold", hardness=200, value=50, blast_resistance=0.30),
        Material("emerald", hardness=220, value=80, blast_resistance=0.35),
        Material("ruby", hardness=230, value=90, blast_resistance=0.35),
        Material("diamond", hardness=300, value=100, blast_resistance=0.50),
        # Generic categories
        Material("ore", hardness=120, value=20, blast_resistance=0.15),
        Material("mineral", hardness=120, value=15, blast_resistance=0.15),
        Material("metal", hardness=150, value=20, blast_resistance=0.20),
    )
}


def material_for(name: str, table: dict[str, Material] | None = None) -> Material:
    """Return the table entry for *name*, or ``DEFAULT_MATERIAL`` if unknown."""
    table = MATERIALS if table is None else table
    return table.get(name.strip().lower(), DEFAULT_MATERIAL)
