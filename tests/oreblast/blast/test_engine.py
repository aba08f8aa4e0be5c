"""Unit tests for the blast engine — falloff, footprint, destruction."""

from __future__ import annotations

import math

import pytest

from oreblast.blast.engine import apply_blast, blast_damage, falloff
from oreblast.grid.builder import build_grid_from_text
from oreblast.grid.materials import MATERIALS

pytestmark = pytest.mark.unit

GOLD_RESIST = MATERIALS["gold"].blast_resistance
STONE_RESIST = MATERIALS["stone"].blast_resistance


# --------------------------------------------------------------------------
# Falloff
# --------------------------------------------------------------------------

class TestFalloff:
    def test_full_power_at_center(self):
        assert falloff(0.0, 3) == 1.0

    def test_zero_at_radius(self):
        assert falloff(3.0, 3) == 0.0

    def test_linear_midpoint(self):
        assert falloff(1.0, 2) == pytest.approx(0.5)

    def test_clamped_beyond_radius(self):
        assert falloff(5.0, 2) == 0.0

    def test_zero_radius(self):
        """Zero radius: full power at the exact center, nothing elsewhere."""
        assert falloff(0.0, 0) == 1.0
        assert falloff(1.0, 0) == 0.0

    def test_blast_damage_applies_resistance(self):
        assert blast_damage(100.0, 0.0, 2, 0.25) == pytest.approx(75.0)
        assert blast_damage(100.0, 1.0, 2, 0.0) == pytest.approx(50.0)


# --------------------------------------------------------------------------
# Scenario: stone | gold | stone
# --------------------------------------------------------------------------

class TestScenarioBlast:
    """The three-block example from the design notes."""

    def test_radius_one_only_center_damaged(self, scenario_grid):
        result = apply_blast(scenario_grid, 1, 0, 1, 150.0)
        gold = scenario_grid.get_block(1, 0)
        assert gold.damage == pytest.approx(150.0 * (1 - GOLD_RESIST))
        assert scenario_grid.get_block(0, 0).damage == 0.0
        assert scenario_grid.get_block(2, 0).damage == 0.0
        assert len(result.affected) == 3
        assert result.destroyed == []

    def test_radius_two_hits_edges(self, scenario_grid):
        apply_blast(scenario_grid, 1, 0, 2, 150.0)
        expected = 150.0 * 0.5 * (1 - STONE_RESIST)
        assert scenario_grid.get_block(0, 0).damage == pytest.approx(expected)
        assert scenario_grid.get_block(2, 0).damage == pytest.approx(expected)

    def test_hit_records_distance_and_damage(self, scenario_grid):
        result = apply_blast(scenario_grid, 1, 0, 2, 150.0)
        by_pos = {h.block.position: h for h in result.hits}
        assert by_pos[(1, 0)].distance == 0.0
        assert by_pos[(0, 0)].distance == pytest.approx(1.0)
        assert by_pos[(1, 0)].damage == pytest.approx(150.0 * (1 - GOLD_RESIST))

    def test_destroying_center(self, scenario_grid):
        result = apply_blast(scenario_grid, 1, 0, 1, 400.0)
        gold = scenario_grid.get_block(1, 0)
        assert gold.destroyed is True
        assert result.destroyed == [gold]

    def test_total_damage_is_cumulative(self, scenario_grid):
        """total_damage sums each affected block's damage after the call."""
        apply_blast(scenario_grid, 1, 0, 1, 100.0)
        second = apply_blast(scenario_grid, 1, 0, 1, 100.0)
        per_blast = 100.0 * (1 - GOLD_RESIST)
        assert second.total_damage == pytest.approx(2 * per_blast)
        assert second.damage_dealt == pytest.approx(per_blast)


# --------------------------------------------------------------------------
# Footprint and bounds
# --------------------------------------------------------------------------

class TestFootprint:
    def test_boundary_block_affected_with_zero_damage(self, field_grid):
        """A block exactly at the radius is listed but takes no damage."""
        result = apply_blast(field_grid, 2, 2, 2, 100.0)
        by_pos = {h.block.position: h for h in result.hits}
        assert (4, 2) in by_pos
        assert by_pos[(4, 2)].distance == pytest.approx(2.0)
        assert by_pos[(4, 2)].damage == 0.0
        assert field_grid.get_block(4, 2).damage == 0.0

    def test_circular_not_square(self, field_grid):
        """Corners of the bounding square are outside the circle."""
        result = apply_blast(field_grid, 2, 2, 1, 100.0)
        positions = {b.position for b in result.affected}
        assert positions == {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}
        assert field_grid.get_block(1, 1).damage == 0.0

    def test_diagonal_falloff(self, field_grid):
        apply_blast(field_grid, 2, 2, 2, 100.0)
        expected = 100.0 * (1 - math.sqrt(2) / 2) * (1 - STONE_RESIST)
        assert field_grid.get_block(1, 1).damage == pytest.approx(expected)

    def test_clipped_at_edges(self, field_grid):
        """A corner blast with a large radius only visits in-grid cells."""
        result = apply_blast(field_grid, 0, 0, 10, 50.0)
        assert len(result.affected) == 25

    @pytest.mark.parametrize("cx,cy", [(-1, 0), (0, -1), (5, 0), (0, 5), (100, 100)])
    def test_center_out_of_bounds_is_noop(self, field_grid, cx, cy):
        result = apply_blast(field_grid, cx, cy, 3, 500.0)
        assert result.affected == []
        assert result.destroyed == []
        assert result.total_damage == 0
        assert all(b.damage == 0.0 for b in field_grid)

    @pytest.mark.parametrize("radius", [0, -1, -10])
    def test_non_positive_radius_is_noop(self, field_grid, radius):
        result = apply_blast(field_grid, 2, 2, radius, 500.0)
        assert result.affected == []
        assert field_grid.get_block(2, 2).damage == 0.0

    def test_empty_cells_ignored(self):
        grid = build_grid_from_text("x,y,ore\n0,0,coal\n4,4,coal\n")
        result = apply_blast(grid, 2, 2, 3, 100.0)
        assert result.affected == []

    def test_negative_power_rejected(self, field_grid):
        with pytest.raises(ValueError):
            apply_blast(field_grid, 2, 2, 1, -5.0)


# --------------------------------------------------------------------------
# Destruction idempotence
# --------------------------------------------------------------------------

class TestDestroyedBlocks:
    def test_destroyed_block_skipped_entirely(self, scenario_grid):
        """Already-destroyed blocks are absent from later results."""
        apply_blast(scenario_grid, 1, 0, 1, 1000.0)
        gold = scenario_grid.get_block(1, 0)
        damage_before = gold.damage
        result = apply_blast(scenario_grid, 1, 0, 1, 1000.0)
        assert gold not in result.affected
        assert gold not in result.destroyed
        assert gold.damage == damage_before

    def test_destruction_reported_once(self, field_grid):
        first = apply_blast(field_grid, 2, 2, 2, 10_000.0)
        second = apply_blast(field_grid, 2, 2, 2, 10_000.0)
        # center, 4 orthogonal and 4 diagonal neighbours; the 4 cells at
        # distance 2 sit on the boundary and take no damage
        assert len(first.destroyed) == 9
        assert second.destroyed == []
        assert {b.position for b in second.affected} == {(0, 2), (4, 2), (2, 0), (2, 4)}
        assert all(h.damage == 0.0 for h in second.hits)

    def test_accumulated_blasts_destroy(self, scenario_grid):
        """Two sub-lethal blasts destroy the block on the second call."""
        gold = scenario_grid.get_block(1, 0)
        power = gold.max_health / (1 - GOLD_RESIST) * 0.6
        first = apply_blast(scenario_grid, 1, 0, 1, power)
        second = apply_blast(scenario_grid, 1, 0, 1, power)
        assert first.destroyed == []
        assert second.destroyed == [gold]

    def test_result_to_dict(self, scenario_grid):
        result = apply_blast(scenario_grid, 1, 0, 1, 400.0)
        d = result.to_dict()
        assert d["center"] == {"x": 1, "y": 0}
        assert d["destroyed"] == [{"x": 1, "y": 0}]
        assert len(d["affected"]) == 3
