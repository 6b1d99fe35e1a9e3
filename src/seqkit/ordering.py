"""
seqkit - Ordering Module.

Search and sort helpers for monotonic sequences:

- sorted_index / sorted_last_index: insertion positions that keep a
  sequence monotonic, for ascending *or* descending input
- stable_sort: three-way comparator sort that never reorders ties
- sorted_direction: classify a sequence as ascending, descending or neither

Direction is inferred by comparing the first and last elements, so the
insertion helpers accept either orientation without a flag. One-dimensional
numeric numpy arrays take a vectorised path (see ``seqkit.config``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key
from typing import Any, TypeVar

import numpy as np

from seqkit.config import get_config

logger = logging.getLogger(__name__)

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def _is_descending(first: Any, last: Any) -> bool:
    return first > last


def _as_numeric_array(seq: Any) -> np.ndarray | None:
    """Return ``seq`` if it qualifies for the numpy path, else None."""
    if not isinstance(seq, np.ndarray):
        return None
    if seq.ndim != 1 or not np.issubdtype(seq.dtype, np.number):
        return None
    if not get_config().allows_vectorized(seq.shape[0]):
        return None
    return seq


# =============================================================================
# Vectorised search
# =============================================================================


def _searchsorted_first(arr: np.ndarray, value: Any) -> int:
    n = arr.shape[0]
    if _is_descending(arr[0], arr[-1]):
        # First i with arr[i] <= value == number of elements > value.
        return int(n - np.searchsorted(arr[::-1], value, side="right"))
    return int(np.searchsorted(arr, value, side="left"))


def _searchsorted_last(arr: np.ndarray, value: Any) -> int:
    n = arr.shape[0]
    if _is_descending(arr[0], arr[-1]):
        # One past the last i with arr[i] >= value == number of elements >= value.
        return int(n - np.searchsorted(arr[::-1], value, side="left"))
    return int(np.searchsorted(arr, value, side="right"))


# =============================================================================
# Insertion Index
# =============================================================================


def _first_index(keys: Sequence[Any], value: Any) -> int:
    if len(keys) == 0:
        return 0
    descending = _is_descending(keys[0], keys[-1])
    for i, key in enumerate(keys):
        if (value >= key) if descending else (value <= key):
            return i
    return len(keys)


def _last_index(keys: Sequence[Any], value: Any) -> int:
    n = len(keys)
    if n == 0:
        return 0
    descending = _is_descending(keys[0], keys[-1])
    for i in range(n - 1, -1, -1):
        key = keys[i]
        if (value <= key) if descending else (value >= key):
            return i + 1
    return 0


def sorted_index(seq: Sequence[T], value: T) -> int:
    """
    Find the lowest index at which ``value`` can be inserted keeping order.

    The sequence is treated as descending when its first element is greater
    than its last, otherwise as ascending.

    Args:
        seq: A monotonic sequence (ascending or descending)
        value: The value to place

    Returns:
        The leftmost valid insertion index; ``len(seq)`` when ``value``
        belongs at the end, ``0`` for an empty sequence

    Examples:
        >>> sorted_index([5, 3, 2, 1], 4)
        1
        >>> sorted_index([30, 50], 40)
        1
    """
    arr = _as_numeric_array(seq)
    if arr is not None and arr.shape[0] > 0:
        logger.debug("sorted_index: vectorised search over %d elements", arr.shape[0])
        return _searchsorted_first(arr, value)
    return _first_index(seq, value)


def sorted_index_by(seq: Sequence[T], value: T, fn: Callable[[T], Any]) -> int:
    """
    Like ``sorted_index`` but comparing ``fn`` projections.

    Examples:
        >>> sorted_index_by([{"x": 4}, {"x": 5}], {"x": 4}, lambda o: o["x"])
        0
    """
    return _first_index([fn(item) for item in seq], fn(value))


def sorted_last_index(seq: Sequence[T], value: T) -> int:
    """
    Find the highest index at which ``value`` can be inserted keeping order.

    The result sits after every element equal to ``value``. The input is
    scanned from its end; it is never reversed or copied.

    Returns:
        The rightmost valid insertion index; ``0`` when ``value`` belongs
        before every element or the sequence is empty

    Examples:
        >>> sorted_last_index([10, 20, 30, 30, 40], 30)
        4
        >>> sorted_last_index([40, 30, 30, 20], 30)
        3
    """
    arr = _as_numeric_array(seq)
    if arr is not None and arr.shape[0] > 0:
        logger.debug("sorted_last_index: vectorised search over %d elements", arr.shape[0])
        return _searchsorted_last(arr, value)
    return _last_index(seq, value)


def sorted_last_index_by(seq: Sequence[T], value: T, fn: Callable[[T], Any]) -> int:
    """
    Like ``sorted_last_index`` but comparing ``fn`` projections.

    Examples:
        >>> sorted_last_index_by([{"x": 4}, {"x": 5}], {"x": 4}, lambda o: o["x"])
        1
    """
    return _last_index([fn(item) for item in seq], fn(value))


# =============================================================================
# Sorting
# =============================================================================


def stable_sort(seq: Iterable[T], comp: Comparator) -> list[T]:
    """
    Sort with a three-way comparator, keeping ties in their original order.

    Each element is decorated with its original index and ties on ``comp``
    are broken by that index, so the result is stable whatever the
    underlying sort does.

    Args:
        seq: Elements to sort (not modified)
        comp: ``comp(a, b)`` returning a negative, zero or positive number

    Returns:
        A new sorted list

    Examples:
        >>> stable_sort([3, 1, 2], lambda a, b: a - b)
        [1, 2, 3]
        >>> stable_sort(["bb", "a", "cc", "d"], lambda a, b: len(a) - len(b))
        ['a', 'd', 'bb', 'cc']
    """

    def decorated(left: tuple[int, T], right: tuple[int, T]) -> int:
        order = comp(left[1], right[1])
        if order:
            return -1 if order < 0 else 1
        return left[0] - right[0]

    ranked = sorted(enumerate(seq), key=cmp_to_key(decorated))
    return [item for _, item in ranked]


def sorted_direction(seq: Sequence[Any]) -> int:
    """
    Classify the overall direction of a sequence.

    The direction is set by the first adjacent pair that differs; any later
    pair moving strictly the other way makes the sequence mixed.

    Returns:
        1 for non-decreasing, -1 for non-increasing, 0 for mixed, flat or
        fewer than two elements

    Examples:
        >>> sorted_direction([0, 1, 2, 2])
        1
        >>> sorted_direction([4, 3, 2])
        -1
        >>> sorted_direction([4, 3, 5])
        0
    """
    arr = _as_numeric_array(seq)
    if arr is not None:
        # Compare rather than subtract: unsigned dtypes wrap on np.diff.
        rising, falling = arr[1:] > arr[:-1], arr[1:] < arr[:-1]
        steps = rising.astype(np.int8) - falling.astype(np.int8)
        nonzero = steps[steps != 0]
        if nonzero.size == 0:
            return 0
        direction = int(nonzero[0])
        return direction if bool(np.all(nonzero == direction)) else 0

    direction = 0
    for i in range(1, len(seq)):
        prev, cur = seq[i - 1], seq[i]
        if cur > prev:
            step = 1
        elif cur < prev:
            step = -1
        else:
            continue
        if direction == 0:
            direction = step
        elif step != direction:
            return 0
    return direction


# =============================================================================
# Selection
# =============================================================================


def max_n(seq: Iterable[T], n: int = 1) -> list[T]:
    """Return the ``n`` largest elements, largest first."""
    return sorted(seq, reverse=True)[: max(n, 0)]


def min_n(seq: Iterable[T], n: int = 1) -> list[T]:
    """Return the ``n`` smallest elements, smallest first."""
    return sorted(seq)[: max(n, 0)]


def reduce_which(seq: Iterable[T], comp: Comparator) -> T | None:
    """
    Return the element preferred by ``comp`` across the whole sequence.

    ``comp(a, b) >= 0`` means ``b`` replaces the current pick ``a``, so
    ``lambda a, b: a - b`` finds the minimum. Returns None when empty.

    Example:
        reduce_which([1, 3, 2], lambda a, b: b - a) -> 3
    """
    iterator = iter(seq)
    try:
        best = next(iterator)
    except StopIteration:
        return None
    for item in iterator:
        if comp(best, item) >= 0:
            best = item
    return best
