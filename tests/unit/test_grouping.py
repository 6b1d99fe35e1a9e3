"""
Unit tests for seqkit grouping, predicate and builder functions.
"""

import math

import pytest

from seqkit.builders import (
    initialize_2d,
    range_inclusive,
    range_inclusive_right,
    repeat_value,
)
from seqkit.errors import InvalidArgumentError
from seqkit.grouping import (
    bifurcate,
    bifurcate_by,
    chunk,
    count_by,
    count_occurrences,
    group_by,
    join,
    longest_item,
    map_object,
    partition,
    reduce_successive,
)
from seqkit.predicates import all_equal, all_of, any_of, none_of


class TestBucketing:
    """Tests for group_by, count_by and friends."""

    def test_group_by(self):
        """Test grouping by a key function."""
        assert group_by([6.1, 4.2, 6.3], math.floor) == {6: [6.1, 6.3], 4: [4.2]}

    def test_group_by_length(self):
        """Test grouping strings by length."""
        assert group_by(["one", "two", "three"], len) == {3: ["one", "two"], 5: ["three"]}

    def test_count_by(self):
        """Test counting per key."""
        assert count_by([6.1, 4.2, 6.3], math.floor) == {6: 2, 4: 1}
        assert count_by(["one", "two", "three"], len) == {3: 2, 5: 1}

    def test_count_occurrences(self):
        """Test counting a value."""
        assert count_occurrences([1, 1, 2, 1, 2, 3], 1) == 3

    def test_map_object(self):
        """Test mapping elements to results."""
        assert map_object([1, 2, 3], lambda a: a * a) == {1: 1, 2: 4, 3: 9}


class TestSplitting:
    """Tests for bifurcate, partition and chunk."""

    def test_bifurcate(self):
        """Test splitting by flags."""
        result = bifurcate(["beep", "boop", "foo", "bar"], [True, True, False, True])
        assert result == (["beep", "boop", "bar"], ["foo"])

    def test_bifurcate_short_flags(self):
        """Test elements beyond the flags land in the second group."""
        assert bifurcate([1, 2, 3], [1]) == ([1], [2, 3])

    def test_bifurcate_by(self):
        """Test splitting by predicate."""
        result = bifurcate_by(["beep", "boop", "foo", "bar"], lambda x: x[0] == "b")
        assert result == (["beep", "boop", "bar"], ["foo"])

    def test_partition_alias(self):
        """Test partition matches bifurcate_by."""
        assert partition([1, 2, 3, 4], lambda x: x > 2) == ([3, 4], [1, 2])

    def test_chunk(self):
        """Test splitting into chunks."""
        assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
        assert chunk([], 3) == []

    def test_chunk_invalid_size(self):
        """Test that a chunk size below 1 is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            chunk([1, 2], 0)
        assert exc_info.value.function == "chunk"
        assert "size=0" in str(exc_info.value)


class TestFolding:
    """Tests for reduce_successive, longest_item and join."""

    def test_reduce_successive(self):
        """Test keeping every accumulator."""
        result = reduce_successive([1, 2, 3, 4, 5, 6], lambda acc, val: acc + val, 0)
        assert result == [0, 1, 3, 6, 10, 15, 21]

    def test_longest_item(self):
        """Test finding the longest argument."""
        assert longest_item("this", "is", "a", "testcase") == "testcase"
        assert longest_item([1, 2, 3], [1, 2], [1, 2, 3, 4, 5]) == [1, 2, 3, 4, 5]
        assert longest_item([1, 2, 3], "foobar") == "foobar"

    def test_longest_item_tie(self):
        """Test the first of equally long values wins."""
        assert longest_item("ab", "cd") == "ab"

    def test_longest_item_empty(self):
        """Test calling with nothing."""
        with pytest.raises(InvalidArgumentError):
            longest_item()

    def test_join(self):
        """Test joining with a distinct final separator."""
        words = ["pen", "pineapple", "apple", "pen"]
        assert join(words, ",", "&") == "pen,pineapple,apple&pen"
        assert join(words, ",") == "pen,pineapple,apple,pen"
        assert join(words) == "pen,pineapple,apple,pen"

    def test_join_short(self):
        """Test join on fewer than two elements."""
        assert join([], ",", "&") == ""
        assert join([1], ",", "&") == "1"


class TestPredicates:
    """Tests for whole-sequence predicates."""

    def test_all_of(self):
        """Test all_of with and without a predicate."""
        assert all_of([4, 2, 3], lambda x: x > 1) is True
        assert all_of([1, 2, 3]) is True
        assert all_of([1, 0]) is False

    def test_any_of(self):
        """Test any_of."""
        assert any_of([0, 1, 2, 0], lambda x: x >= 2) is True
        assert any_of([0, 0, 1, 0]) is True
        assert any_of([]) is False

    def test_none_of(self):
        """Test none_of."""
        assert none_of([0, 1, 3, 0], lambda x: x == 2) is True
        assert none_of([0, 0, 0]) is True
        assert none_of([0, 1]) is False

    def test_all_equal(self):
        """Test all_equal."""
        assert all_equal([1, 2, 3, 4, 5, 6]) is False
        assert all_equal([1, 1, 1, 1]) is True
        assert all_equal([]) is True


class TestBuilders:
    """Tests for list builders."""

    def test_range_inclusive(self):
        """Test inclusive ranges."""
        assert range_inclusive(5) == [0, 1, 2, 3, 4, 5]
        assert range_inclusive(7, 3) == [3, 4, 5, 6, 7]
        assert range_inclusive(9, 0, 2) == [0, 2, 4, 6, 8]

    def test_range_inclusive_right(self):
        """Test descending inclusive ranges."""
        assert range_inclusive_right(5) == [5, 4, 3, 2, 1, 0]
        assert range_inclusive_right(7, 3) == [7, 6, 5, 4, 3]
        assert range_inclusive_right(9, 0, 2) == [8, 6, 4, 2, 0]

    def test_range_end_before_start(self):
        """Test an empty range."""
        assert range_inclusive(1, 5) == []

    def test_range_float_step_stops_at_end(self):
        """Test fractional steps never pass end."""
        assert range_inclusive(0.5, 0, 0.5) == [0, 0.5]
        assert range_inclusive(1, 0, 0.25) == [0, 0.25, 0.5, 0.75, 1.0]
        assert range_inclusive(0.9, 0, 0.25) == [0, 0.25, 0.5, 0.75]
        assert range_inclusive_right(1, 0, 0.25) == [1.0, 0.75, 0.5, 0.25, 0]

    def test_range_float_bounds(self):
        """Test fractional start and end with an integer step."""
        assert range_inclusive(3.5, 0.5) == [0.5, 1.5, 2.5, 3.5]
        assert range_inclusive(3.4, 0.5) == [0.5, 1.5, 2.5]

    def test_range_invalid_step(self):
        """Test that non-positive steps are rejected."""
        with pytest.raises(InvalidArgumentError):
            range_inclusive(5, 0, 0)
        with pytest.raises(InvalidArgumentError):
            range_inclusive_right(5, 0, -1)

    def test_repeat_value(self):
        """Test repeating a value."""
        assert repeat_value(5, 2) == [2, 2, 2, 2, 2]
        assert repeat_value(0) == []

    def test_initialize_2d(self):
        """Test building a grid."""
        assert initialize_2d(2, 2, 0) == [[0, 0], [0, 0]]

    def test_initialize_2d_rows_independent(self):
        """Test that rows do not share storage."""
        grid = initialize_2d(3, 2)
        grid[0][0] = "x"
        assert grid == [["x", None, None], [None, None, None]]
