"""Site percolation on an n-by-n grid backed by weighted union-find."""

from percolation.core.disjoint_set import DisjointSet
from percolation.core.grid import PercolationGrid
from percolation.error.exceptions import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    PercolationError,
)

__version__ = "0.1.0"

__all__ = [
    "DisjointSet",
    "PercolationGrid",
    "PercolationError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
]
