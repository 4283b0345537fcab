"""Tests for built-in scenarios."""

import numpy as np
import pytest

from percolation.analysis.scenarios import ScenarioRegistry, get_scenarios


def no_random():
    raise AssertionError("deterministic scenario drew a random value")


class TestScenarioRegistry:
    """Tests for scenario lookup."""

    def test_all_scenarios(self):
        """Test the ten built-in scenarios are registered with unique names."""
        names = [scenario.name for scenario in ScenarioRegistry.get_all()]
        assert len(names) == 10
        assert len(set(names)) == 10
        assert names[0] == "maze"

    def test_get_by_names_keeps_order(self):
        """Test scenarios are returned in the requested order."""
        scenarios = ScenarioRegistry.get_by_names(["comb", "maze"])
        assert [scenario.name for scenario in scenarios] == ["comb", "maze"]

    def test_unknown_name(self):
        """Test unknown names raise with the available names."""
        with pytest.raises(ValueError, match="Unknown scenarios.*Available"):
            ScenarioRegistry.get_by_names(["maze", "nope"])

    def test_get_scenarios_comma_separated(self):
        """Test comma-separated names are split."""
        scenarios = get_scenarios("maze, winding")
        assert [scenario.name for scenario in scenarios] == ["maze", "winding"]

    def test_get_scenarios_none(self):
        """Test None returns every scenario."""
        assert len(get_scenarios()) == 10


class TestScenarioBuild:
    """Tests for building scenario grids."""

    def test_maze(self):
        """Test the maze percolates through its single route."""
        grid = get_scenarios("maze")[0].build(no_random)

        assert grid.size == 20
        assert grid.percolates()
        assert grid.is_connected_to_top(19, 4)
        # Upper corridor is open but cut off from the top row
        assert grid.is_open(2, 3)
        assert not grid.is_connected_to_top(2, 3)

    def test_winding(self):
        """Test the winding path percolates."""
        grid = get_scenarios("winding")[0].build(no_random)

        assert grid.size == 10
        assert grid.percolates()
        assert grid.is_connected_to_top(9, 3)
        assert grid.open_count == 32

    def test_lattice_never_touches_top(self):
        """Test the lattice block is open but not full."""
        grid = get_scenarios("lattice")[0].build(no_random)

        assert grid.open_count > 0
        assert not grid.percolates()
        assert not grid.full_sites().any()

    def test_checkerboard_column(self):
        """Test the open center column percolates."""
        grid = get_scenarios("checkerboard-column")[0].build(no_random)

        assert grid.percolates()
        assert all(grid.is_open(row, 25) for row in range(50))

    def test_stripes_are_isolated(self):
        """Test diagonal stripes never join up."""
        grid = get_scenarios("stripes")[0].build(no_random)

        assert not grid.percolates()
        assert grid.is_connected_to_top(0, 0)
        assert grid.is_open(49, 0)
        assert not grid.is_connected_to_top(49, 0)

    def test_comb(self):
        """Test the comb percolates down its open columns."""
        grid = get_scenarios("comb")[0].build(no_random)

        assert grid.percolates()
        assert grid.is_open(49, 1)
        assert grid.is_open(0, 3)
        assert not grid.is_open(25, 1)

    def test_random_scenario_is_reproducible(self):
        """Test a random scenario depends only on the random source."""
        scenario = get_scenarios("random-sparse")[0]
        first = scenario.build(np.random.default_rng(1).random)
        second = scenario.build(np.random.default_rng(1).random)

        assert first.size == 30
        assert np.array_equal(first.to_array(), second.to_array())
