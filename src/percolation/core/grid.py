"""Percolation grid with incremental top-to-bottom connectivity."""

import logging
from typing import Callable

import numpy as np

from percolation.core.disjoint_set import DisjointSet
from percolation.error.exceptions import IndexOutOfRangeError, InvalidArgumentError

logger = logging.getLogger(__name__)


class PercolationGrid:
    """An n-by-n grid of sites that are opened one at a time.

    Sites are addressed by ``(row, col)`` with row 0 at the top. Two
    union-find structures follow the open sites:

    - ``full_check`` also holds a virtual bottom node and answers whether the
      grid percolates.
    - ``top_check`` holds only the virtual top node. Once the grid percolates,
      every open bottom-row site shares a root with the virtual bottom, so a
      single structure would report those sites as reachable from the top even
      when they are not (backwash). ``is_connected_to_top`` reads this one.

    Site ``(row, col)`` maps to union-find index ``1 + col + n * row``; index 0
    is the virtual top and ``n * n + 1`` the virtual bottom.
    """

    def __init__(self, n: int) -> None:
        """
        Create a grid with every site closed.

        Args:
            n: Side length of the grid (at least 1)

        Raises:
            InvalidArgumentError: If n is not a positive integer
        """
        if not isinstance(n, (int, np.integer)) or isinstance(n, bool) or n < 1:
            raise InvalidArgumentError(f"grid size must be a positive integer, got {n!r}")

        self._n = int(n)
        self._grid = np.zeros((self._n, self._n), dtype=bool)
        self._open_count = 0
        self._percolated = False

        sites = self._n * self._n
        self.full_check = DisjointSet(sites + 2)
        self.top_check = DisjointSet(sites + 1)
        self.virtual_top = 0
        self.virtual_bottom = sites + 1

        logger.debug(f"Created {self._n}x{self._n} percolation grid")

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return self._n

    @property
    def open_count(self) -> int:
        """Number of open sites."""
        return self._open_count

    def open_fraction(self) -> float:
        """Fraction of all sites that are open."""
        return self._open_count / (self._n * self._n)

    def _validate(self, row: int, col: int) -> None:
        for value in (row, col):
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
                raise IndexOutOfRangeError(
                    f"site coordinates must be integers, got ({row!r}, {col!r})"
                )
        if not (0 <= row < self._n and 0 <= col < self._n):
            raise IndexOutOfRangeError(
                f"site ({row}, {col}) is outside a {self._n}x{self._n} grid"
            )

    def _index(self, row: int, col: int) -> int:
        return 1 + col + self._n * row

    def open(self, row: int, col: int) -> None:
        """Open a site and join it to its open neighbors.

        Opening an already open site does nothing.

        Args:
            row: Row of the site (0 is the top row)
            col: Column of the site

        Raises:
            IndexOutOfRangeError: If the site is outside the grid or a
                coordinate is not an integer
        """
        self._validate(row, col)
        if self._grid[row, col]:
            return

        self._grid[row, col] = True
        self._open_count += 1
        site = self._index(row, col)

        if row == 0:
            self.full_check.union(self.virtual_top, site)
            self.top_check.union(self.virtual_top, site)

        # The bottom sentinel is kept out of top_check
        if row == self._n - 1:
            self.full_check.union(self.virtual_bottom, site)

        for neighbor_row, neighbor_col in (
            (row, col - 1),
            (row, col + 1),
            (row - 1, col),
            (row + 1, col),
        ):
            if (
                0 <= neighbor_row < self._n
                and 0 <= neighbor_col < self._n
                and self._grid[neighbor_row, neighbor_col]
            ):
                neighbor = self._index(neighbor_row, neighbor_col)
                self.full_check.union(site, neighbor)
                self.top_check.union(site, neighbor)

        if not self._percolated and self.percolates():
            self._percolated = True
            logger.debug(
                f"Grid percolates after opening ({row}, {col}) "
                f"with {self._open_count} open sites"
            )

    def open_random(self, p: float, uniform: Callable[[], float]) -> None:
        """Open each site independently with probability p.

        Sites are visited in row-major order and exactly one value is drawn
        from ``uniform`` per site, whether or not it is already open.

        Args:
            p: Probability of opening a site (0.0-1.0)
            uniform: Zero-argument callable returning floats in [0, 1)

        Raises:
            InvalidArgumentError: If p is outside [0, 1]
        """
        if not 0.0 <= p <= 1.0:
            raise InvalidArgumentError(f"probability must be between 0 and 1, got {p}")

        for row in range(self._n):
            for col in range(self._n):
                if uniform() < p:
                    self.open(row, col)

        logger.debug(
            f"Random fill with p={p}: {self._open_count} open sites, "
            f"percolates={self.percolates()}"
        )

    def is_open(self, row: int, col: int) -> bool:
        """Check whether a site is open.

        Raises:
            IndexOutOfRangeError: If the site is outside the grid or a
                coordinate is not an integer
        """
        self._validate(row, col)
        return bool(self._grid[row, col])

    def is_connected_to_top(self, row: int, col: int) -> bool:
        """Check whether an open path joins the site to the top row.

        Closed sites are never connected.

        Raises:
            IndexOutOfRangeError: If the site is outside the grid or a
                coordinate is not an integer
        """
        self._validate(row, col)
        return self.top_check.find(self._index(row, col)) == self.top_check.find(
            self.virtual_top
        )

    def percolates(self) -> bool:
        """Check whether an open path joins the top row to the bottom row."""
        return self.full_check.find(self.virtual_top) == self.full_check.find(
            self.virtual_bottom
        )

    def to_array(self) -> np.ndarray:
        """Copy of the open-site table as an n-by-n boolean array."""
        return self._grid.copy()

    def full_sites(self) -> np.ndarray:
        """n-by-n boolean array marking the sites connected to the top row."""
        full = np.zeros((self._n, self._n), dtype=bool)
        for row, col in zip(*np.nonzero(self._grid)):
            full[row, col] = self.is_connected_to_top(int(row), int(col))
        return full

    def __repr__(self) -> str:
        return (
            f"PercolationGrid(n={self._n}, open={self._open_count}, "
            f"percolates={self.percolates()})"
        )
