"""Shared fixtures for oreblast tests."""

from __future__ import annotations

import pytest

from oreblast.grid.builder import build_grid_from_text

# Three blocks in a row: stone | gold | stone
SCENARIO_CSV = (
    "x,y,ore_type,hardness,value\n"
    "0,0,stone,100,1\n"
    "1,0,gold,200,50\n"
    "2,0,stone,100,1\n"
)

# 5x5 field of stone with a diamond at the center
FIELD_CSV = "x,y,material\n" + "".join(
    f"{x},{y},{'diamond' if (x, y) == (2, 2) else 'stone'}\n"
    for y in range(5)
    for x in range(5)
)


@pytest.fixture
def scenario_csv() -> str:
    return SCENARIO_CSV


@pytest.fixture
def scenario_grid():
    return build_grid_from_text(SCENARIO_CSV)


@pytest.fixture
def field_grid():
    return build_grid_from_text(FIELD_CSV)
