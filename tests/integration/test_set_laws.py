"""
Integration tests for algebraic laws across seqkit modules.

These exercise the public package surface (``import seqkit``) on a range of
inputs rather than single literal cases.
"""

import math
from collections import Counter

import pytest

import seqkit

SAMPLES = [
    ([], []),
    ([1, 2, 3], [1, 2, 4]),
    ([1, 2, 2], [1, 3, 1]),
    ([5, 5, 5], [5]),
    (["a", "b"], ["c"]),
    ([1, "1", 1.5], ["1", 2]),
    ([(1, 2), (3, 4)], [(3, 4)]),
]


@pytest.mark.parametrize("a,b", SAMPLES)
class TestSetLaws:
    """Laws that hold for every pair of samples."""

    def test_union_value_set(self, a, b):
        """Test union holds exactly the values of a or b."""
        assert set(seqkit.union(a, b)) == set(a) | set(b)

    def test_union_has_no_repeats(self, a, b):
        """Test union is already unique."""
        result = seqkit.union(a, b)
        assert seqkit.unique(result) == result

    def test_intersection_subset(self, a, b):
        """Test intersection values belong to both operands."""
        result = set(seqkit.intersection(a, b))
        assert result <= set(a)
        assert result <= set(b)

    def test_difference_and_intersection_partition_a(self, a, b):
        """Test difference and intersection split a between them."""
        left = seqkit.difference(a, b)
        right = seqkit.intersection(a, b)
        assert Counter(left) + Counter(right) == Counter(a)

    def test_symmetric_difference_duality(self, a, b):
        """Test swapping operands swaps segments."""
        forward = seqkit.symmetric_difference(a, b)
        backward = seqkit.symmetric_difference(b, a)
        assert Counter(forward) == Counter(backward)
        only_a = seqkit.difference(a, b)
        only_b = seqkit.difference(b, a)
        assert forward == only_a + only_b
        assert backward == only_b + only_a

    def test_by_forms_partition_a(self, a, b):
        """Test difference_by and intersection_by split a between them."""
        left = seqkit.difference_by(a, b, repr)
        right = seqkit.intersection_by(a, b, repr)
        assert Counter(left) + Counter(right) == Counter(a)

    def test_unique_idempotent(self, a, b):
        """Test unique(unique(s)) == unique(s)."""
        s = a + b
        assert seqkit.unique(seqkit.unique(s)) == seqkit.unique(s)

    def test_with_matches_base_form(self, a, b):
        """Test that an equality comparator reproduces the hashed forms."""
        eq = lambda x, y: x == y  # noqa: E731
        assert seqkit.difference_with(a, b, eq) == seqkit.difference(a, b)
        assert seqkit.intersection_with(a, b, eq) == seqkit.intersection(a, b)
        assert seqkit.union_with(a, b, eq) == seqkit.union(a, b)
        assert seqkit.symmetric_difference_with(a, b, eq) == seqkit.symmetric_difference(a, b)


class TestLiteralScenarios:
    """End-to-end literal examples through the package namespace."""

    def test_scenarios(self):
        """Test the documented literal scenarios."""
        assert seqkit.difference([1, 2, 3], [1, 2, 4]) == [3]
        assert seqkit.sorted_index([5, 3, 2, 1], 4) == 1
        assert seqkit.sorted_last_index([10, 20, 30, 30, 40], 30) == 4
        assert seqkit.sorted_direction([4, 3, 5]) == 0
        assert seqkit.zip(["a", "b"], [1, 2], [True, False]) == [
            ["a", 1, True],
            ["b", 2, False],
        ]
        assert seqkit.unzip([["a", 1, True], ["b", 2]]) == [["a", "b"], [1, 2], [True]]

    def test_pipeline(self):
        """Test chaining grouping, ordering and set algebra."""
        readings = [3.2, 1.1, 3.9, 2.5, 1.4, 2.2]
        buckets = seqkit.group_by(readings, math.floor)
        keys = seqkit.stable_sort(list(buckets), lambda x, y: x - y)
        assert keys == [1, 2, 3]
        assert seqkit.sorted_direction(keys) == 1
        assert seqkit.sorted_index(keys, 2) == 1
        assert seqkit.difference_by(readings, [1.0], math.floor) == [3.2, 3.9, 2.5, 2.2]

    def test_public_surface(self):
        """Test that every exported name resolves."""
        for name in seqkit.__all__:
            assert hasattr(seqkit, name), name
