"""Built-in opening patterns for demonstrating percolation."""

from dataclasses import dataclass
from typing import Callable

from percolation.core.grid import PercolationGrid

Uniform = Callable[[], float]

# fmt: off
MAZE_SITES = [
    (2, 3), (2, 4), (2, 5), (2, 6), (2, 3), (3, 2), (4, 2), (5, 2), (6, 2), (6, 3),
    (6, 4), (6, 5), (6, 6), (6, 7), (5, 7), (4, 7), (3, 7), (4, 8), (4, 9), (4, 10),
    (3, 11), (4, 11), (5, 11), (6, 11), (6, 12), (6, 13), (6, 14), (6, 15), (6, 16),
    (5, 16), (4, 16), (3, 16), (2, 15), (2, 14), (2, 13), (2, 12), (4, 4), (4, 5),
    (5, 4), (5, 5), (4, 13), (4, 14), (5, 13), (5, 14), (7, 3), (8, 2), (9, 2),
    (10, 2), (11, 3), (11, 4), (11, 5), (11, 6), (11, 7), (11, 8), (11, 9), (11, 10),
    (11, 11), (11, 12), (11, 13), (11, 14), (11, 15), (9, 4), (9, 5), (9, 6), (9, 7),
    (9, 8), (9, 9), (9, 10), (9, 11), (9, 12), (9, 13), (9, 14), (10, 16), (9, 16),
    (8, 16), (7, 15), (12, 14), (13, 14), (14, 14), (15, 14), (16, 14), (17, 14),
    (18, 14), (19, 14), (12, 4), (13, 4), (14, 4), (15, 4), (16, 4), (17, 4), (18, 4),
    (19, 4), (3, 9), (2, 9), (1, 9), (0, 9), (8, 3), (8, 15), (11, 2), (11, 16),
]
# fmt: on

# fmt: off
WINDING_SITES = [
    (0, 3), (0, 4), (0, 5), (0, 6), (1, 2), (1, 3), (2, 1), (2, 2), (3, 1), (4, 1),
    (5, 1), (6, 1), (7, 1), (7, 2), (8, 2), (8, 3), (9, 3), (9, 4), (9, 5), (9, 6),
    (8, 6), (8, 7), (7, 7), (7, 8), (6, 8), (5, 8), (4, 8), (3, 8), (2, 8), (2, 7),
    (1, 7), (1, 6),
]
# fmt: on


@dataclass
class Scenario:
    """A named way of opening sites on a fresh grid."""

    name: str
    size: int
    description: str
    fill: Callable[[PercolationGrid, Uniform], None]

    def build(self, uniform: Uniform) -> PercolationGrid:
        """Create a grid of the scenario's size and open its sites.

        Args:
            uniform: Random source, only drawn from by random scenarios

        Returns:
            The populated grid
        """
        grid = PercolationGrid(self.size)
        self.fill(grid, uniform)
        return grid


def _open_sites(sites: list[tuple[int, int]]) -> Callable[[PercolationGrid, Uniform], None]:
    def fill(grid: PercolationGrid, uniform: Uniform) -> None:
        for row, col in sites:
            grid.open(row, col)

    return fill


def _open_random(p: float) -> Callable[[PercolationGrid, Uniform], None]:
    def fill(grid: PercolationGrid, uniform: Uniform) -> None:
        grid.open_random(p, uniform)

    return fill


def _fill_lattice(grid: PercolationGrid, uniform: Uniform) -> None:
    for i in range(10, 40):
        for j in range(10, 40):
            if (i % 2 == 0 and j % 2 == 0) or i % 3 == 0 or j % 3 == 0:
                grid.open(i, j)


def _fill_checkerboard_column(grid: PercolationGrid, uniform: Uniform) -> None:
    n = grid.size
    for i in range(n):
        grid.open(i, n // 2)
    for i in range(n):
        for j in range(n):
            if (i + j) % 2 == 0:
                grid.open(i, j)


def _fill_diagonals(grid: PercolationGrid, uniform: Uniform) -> None:
    n = grid.size
    for i in range(n):
        for j in range(n):
            if (i + j) % 4 == 0 or (i + j) % 3 == 0:
                grid.open(i, j)


def _fill_stripes(grid: PercolationGrid, uniform: Uniform) -> None:
    n = grid.size
    for i in range(n):
        for j in reversed(range(n)):
            if (i + j) % 7 == 0:
                grid.open(i, j)


def _fill_comb(grid: PercolationGrid, uniform: Uniform) -> None:
    n = grid.size
    for col in range(n):
        if col % 2 == 0:
            for row in range(n):
                grid.open(row, col)
        elif col % 4 == 1:
            grid.open(n - 1, col)
        else:
            grid.open(0, col)


BUILTIN_SCENARIOS = [
    Scenario("maze", 20, "Hand-traced maze of corridors and rooms", _open_sites(MAZE_SITES)),
    Scenario("winding", 10, "Winding path from the top row down and back up", _open_sites(WINDING_SITES)),
    Scenario("random-dense", 100, "Random fill with p=0.6", _open_random(0.6)),
    Scenario("lattice", 50, "Lattice block in the middle of the grid", _fill_lattice),
    Scenario("checkerboard-column", 50, "Open center column over a checkerboard", _fill_checkerboard_column),
    Scenario("diagonals", 50, "Diagonals where (row+col) is a multiple of 3 or 4", _fill_diagonals),
    Scenario("random-sparse", 30, "Random fill with p=0.5", _open_random(0.5)),
    Scenario("stripes", 50, "Isolated diagonal stripes where (row+col) is a multiple of 7", _fill_stripes),
    Scenario("comb", 50, "Open even columns joined alternately at the top and bottom", _fill_comb),
    Scenario("random-large", 250, "Large random fill with p=0.6", _open_random(0.6)),
]


class ScenarioRegistry:
    """Central registry for all built-in scenarios."""

    _scenarios: list[Scenario] = BUILTIN_SCENARIOS

    @classmethod
    def get_all(cls) -> list[Scenario]:
        """Get all available scenarios."""
        return list(cls._scenarios)

    @classmethod
    def get_by_names(cls, names: list[str]) -> list[Scenario]:
        """Get scenarios by their names.

        Args:
            names: List of scenario names

        Returns:
            List of matching scenarios, in the order requested

        Raises:
            ValueError: If any scenario name is not found
        """
        scenario_dict = {scenario.name: scenario for scenario in cls._scenarios}

        unknown = set(names) - set(scenario_dict.keys())
        if unknown:
            available = ", ".join(sorted(scenario_dict.keys()))
            raise ValueError(f"Unknown scenarios: {sorted(unknown)}. Available: {available}")

        return [scenario_dict[name] for name in names]


def get_scenarios(names: str | list[str] | None = None) -> list[Scenario]:
    """Get built-in scenarios.

    Args:
        names: Scenario names to filter. Can be:
            - None: Return all scenarios
            - str: Comma-separated names (e.g., "maze,comb")
            - list[str]: List of names (e.g., ["maze", "comb"])

    Returns:
        List of scenarios
    """
    if names is None:
        return ScenarioRegistry.get_all()

    if isinstance(names, str):
        names = [name.strip() for name in names.split(",") if name.strip()]

    return ScenarioRegistry.get_by_names(names)
