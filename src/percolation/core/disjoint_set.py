"""Weighted quick-union (Disjoint Set Union) over a fixed range of indices.

This module provides the union-find structure used by the percolation grid
to track which sites belong to the same open cluster.
"""

from percolation.error.exceptions import IndexOutOfRangeError, InvalidArgumentError

ROOT = -1


class DisjointSet:
    """Union-Find over the elements ``0 .. count - 1`` with union by size.

    ``find`` follows parent links without path compression. Tree height stays
    within O(log count) because ``union`` always hangs the smaller tree under
    the larger one, so every ``find`` is O(log count) in the worst case.

    Attributes:
        parent: Parent index of each element, or ``ROOT`` for a root.
        size: Number of elements in the tree rooted at each index. Only
            meaningful while the index is a root.
    """

    def __init__(self, count: int) -> None:
        """Create ``count`` singleton sets.

        Args:
            count: Number of elements in the universe.

        Raises:
            InvalidArgumentError: If count is negative.
        """
        if count < 0:
            raise InvalidArgumentError(f"count must be non-negative, got {count}")
        self._count = count
        self.parent: list[int] = [ROOT] * count
        self.size: list[int] = [1] * count

    def _validate(self, p: int) -> None:
        if not 0 <= p < self._count:
            raise IndexOutOfRangeError(f"index {p} is not between 0 and {self._count - 1}")

    def find(self, p: int) -> int:
        """Find the root of element p.

        Args:
            p: Element to find the root of.

        Returns:
            The root element of the set containing p.

        Raises:
            IndexOutOfRangeError: If p is outside ``[0, count)``.
        """
        self._validate(p)
        while self.parent[p] != ROOT:
            p = self.parent[p]
        return p

    def union(self, p: int, q: int) -> None:
        """Merge the sets containing p and q.

        The root of the smaller tree becomes a child of the larger one. On a
        tie the root of q is attached under the root of p.

        Args:
            p: Element from first set.
            q: Element from second set.
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self.size[root_p] >= self.size[root_q]:
            self.parent[root_q] = root_p
            self.size[root_p] += self.size[root_q]
        else:
            self.parent[root_p] = root_q
            self.size[root_q] += self.size[root_p]

    def is_connected(self, p: int, q: int) -> bool:
        """Check if p and q are in the same set."""
        return self.find(p) == self.find(q)

    def count(self) -> int:
        """Get number of elements.

        Returns:
            Size of the universe, not the number of disjoint sets.
        """
        return self._count
