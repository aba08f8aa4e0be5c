"""Grid data model — blocks, materials, the sparse grid and its builder."""

from oreblast.grid.block import Block
from oreblast.grid.builder import build_grid, build_grid_from_text, reset_grid
from oreblast.grid.grid import Grid, GridSnapshot, get_block_at
from oreblast.grid.materials import DEFAULT_MATERIAL, MATERIALS, Material, material_for

__all__ = [
    "Block",
    "DEFAULT_MATERIAL",
    "Grid",
    "GridSnapshot",
    "MATERIALS",
    "Material",
    "build_grid",
    "build_grid_from_text",
    "get_block_at",
    "material_for",
    "reset_grid",
]
