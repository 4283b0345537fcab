"""Tests for DisjointSet data structure."""

import math
import random

import pytest

from percolation.core.disjoint_set import ROOT, DisjointSet
from percolation.error.exceptions import IndexOutOfRangeError, InvalidArgumentError


def tree_height(ds: DisjointSet, p: int) -> int:
    height = 0
    while ds.parent[p] != ROOT:
        p = ds.parent[p]
        height += 1
    return height


class TestDisjointSet:
    """Test DisjointSet data structure."""

    def test_initialization(self):
        """Test every element starts as its own root."""
        ds = DisjointSet(4)
        assert ds.count() == 4
        assert ds.parent == [ROOT] * 4
        assert ds.size == [1] * 4
        assert [ds.find(i) for i in range(4)] == [0, 1, 2, 3]

    def test_empty_universe(self):
        """Test zero elements is valid but has no valid index."""
        ds = DisjointSet(0)
        assert ds.count() == 0
        with pytest.raises(IndexOutOfRangeError):
            ds.find(0)

    def test_negative_count(self):
        """Test negative count is rejected."""
        with pytest.raises(InvalidArgumentError):
            DisjointSet(-1)

    def test_invalid_argument_is_value_error(self):
        """Test InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            DisjointSet(-5)

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_find_out_of_range(self, index):
        """Test find rejects indices outside the universe."""
        ds = DisjointSet(4)
        with pytest.raises(IndexOutOfRangeError):
            ds.find(index)

    def test_union_out_of_range_leaves_state_unchanged(self):
        """Test a failed union does not mutate anything."""
        ds = DisjointSet(4)
        ds.union(0, 1)
        parent, size = list(ds.parent), list(ds.size)

        with pytest.raises(IndexOutOfRangeError):
            ds.union(1, 4)
        with pytest.raises(IndexOutOfRangeError):
            ds.union(-1, 2)

        assert ds.parent == parent
        assert ds.size == size

    def test_union_two_elements(self):
        """Test union of two elements."""
        ds = DisjointSet(3)
        ds.union(0, 1)
        assert ds.is_connected(0, 1)
        assert not ds.is_connected(0, 2)

    def test_tie_break_keeps_first_root(self):
        """Test equal sizes attach the second root under the first."""
        ds = DisjointSet(4)
        ds.union(0, 1)
        ds.union(2, 3)
        ds.union(0, 2)

        assert ds.find(0) == ds.find(1) == ds.find(2) == ds.find(3) == 0
        assert ds.size[0] == 4
        assert ds.parent[2] == 0

    def test_smaller_tree_goes_under_larger(self):
        """Test the larger tree's root survives regardless of argument order."""
        ds = DisjointSet(3)
        ds.union(0, 1)
        ds.union(2, 0)

        assert ds.find(2) == 0
        assert ds.parent[2] == 0
        assert ds.size[0] == 3

    def test_union_symmetry(self):
        """Test union(p, q) and union(q, p) give the same partition."""
        forward = DisjointSet(2)
        forward.union(0, 1)
        backward = DisjointSet(2)
        backward.union(1, 0)

        assert forward.is_connected(0, 1)
        assert backward.is_connected(0, 1)
        assert forward.size[forward.find(0)] == backward.size[backward.find(0)] == 2

    def test_union_idempotent(self):
        """Test that repeated union operations are no-ops."""
        ds = DisjointSet(3)
        ds.union(0, 1)
        parent, size = list(ds.parent), list(ds.size)

        ds.union(0, 1)
        ds.union(1, 0)

        assert ds.parent == parent
        assert ds.size == size

    def test_transitive_union(self):
        """Test transitive property: union(0,1), union(1,2) -> 0~2."""
        ds = DisjointSet(3)
        ds.union(0, 1)
        ds.union(1, 2)
        assert ds.is_connected(0, 2)

    def test_find_does_not_compress_paths(self):
        """Test find leaves parent links untouched."""
        ds = DisjointSet(4)
        ds.union(0, 1)
        ds.union(2, 3)
        ds.union(0, 2)
        parent = list(ds.parent)

        assert ds.find(3) == 0
        assert ds.parent == parent
        assert ds.parent[3] == 2

    def test_large_group(self):
        """Test with larger number of elements."""
        ds = DisjointSet(100)
        for i in range(1, 100):
            ds.union(0, i)

        assert all(ds.find(i) == 0 for i in range(100))
        assert ds.size[0] == 100

    def test_height_is_logarithmic(self):
        """Test union by size keeps trees shallow under random unions."""
        count = 1000
        ds = DisjointSet(count)
        rng = random.Random(7)
        for _ in range(5000):
            ds.union(rng.randrange(count), rng.randrange(count))

        max_height = max(tree_height(ds, i) for i in range(count))
        assert max_height <= math.floor(math.log2(count))

    def test_root_sizes_sum_to_count(self):
        """Test root sizes partition the universe."""
        ds = DisjointSet(10)
        ds.union(0, 1)
        ds.union(2, 3)
        ds.union(3, 4)
        ds.union(9, 0)

        roots = {ds.find(i) for i in range(10)}
        assert sum(ds.size[root] for root in roots) == 10
        for root in roots:
            members = [i for i in range(10) if ds.find(i) == root]
            assert ds.size[root] == len(members)
