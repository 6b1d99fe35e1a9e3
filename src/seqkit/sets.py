"""
seqkit - Set Algebra Module.

Order-preserving set operations over ordinary sequences. Unlike the
builtin ``set`` operators these keep the order (and, where documented, the
duplicates) of their inputs and always return lists.

Each operation comes in up to three forms:

- the base form compares values directly through a hash index, O(n + m);
- the ``_by`` form compares ``fn(value)`` keys through a hash index;
- the ``_with`` form takes an equality comparator ``comp(x, y)`` and scans
  pairwise, O(n * m), so values need not be hashable or even comparable
  with ``==``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from seqkit.membership import Membership, dedupe

T = TypeVar("T")
K = TypeVar("K")

Projection = Callable[[T], K]
Equality = Callable[[T, T], bool]


def _matches_any(x: T, others: list[T], comp: Equality) -> bool:
    return any(comp(x, y) for y in others)


# =============================================================================
# Difference
# =============================================================================


def difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """
    Return the elements of ``a`` whose value does not occur in ``b``.

    Order and duplicates of ``a`` are preserved.

    Args:
        a: Elements to keep
        b: Values to remove

    Returns:
        A new list

    Examples:
        >>> difference([1, 2, 3], [1, 2, 4])
        [3]
        >>> difference([1, 1, 5], [])
        [1, 1, 5]
    """
    present = Membership(b)
    return [x for x in a if x not in present]


def difference_by(a: Iterable[T], b: Iterable[T], fn: Projection) -> list[T]:
    """
    Return the elements of ``a`` whose projection is not a projection of ``b``.

    Examples:
        >>> difference_by([2.1, 1.2], [2.3, 3.4], math.floor)
        [1.2]
        >>> difference_by([{"x": 2}, {"x": 1}], [{"x": 1}], lambda v: v["x"])
        [{'x': 2}]
    """
    present = Membership(fn(y) for y in b)
    return [x for x in a if fn(x) not in present]


def difference_with(a: Iterable[T], b: Iterable[T], comp: Equality) -> list[T]:
    """
    Return the elements ``x`` of ``a`` for which no ``y`` in ``b`` has ``comp(x, y)``.

    Examples:
        >>> difference_with([1, 1.2, 1.5, 3, 0], [1.9, 3, 0],
        ...                 lambda a, b: round(a) == round(b))
        [1, 1.2]
    """
    others = list(b)
    return [x for x in a if not _matches_any(x, others, comp)]


# =============================================================================
# Intersection
# =============================================================================


def intersection(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """
    Return the elements of ``a`` whose value also occurs in ``b``.

    Order and duplicates of ``a`` are preserved.

    Examples:
        >>> intersection([1, 2, 3], [4, 3, 2])
        [2, 3]
    """
    present = Membership(b)
    return [x for x in a if x in present]


def intersection_by(a: Iterable[T], b: Iterable[T], fn: Projection) -> list[T]:
    """
    Return the elements of ``a`` whose projection is a projection of ``b``.

    Examples:
        >>> intersection_by([2.1, 1.2], [2.3, 3.4], math.floor)
        [2.1]
    """
    present = Membership(fn(y) for y in b)
    return [x for x in a if fn(x) in present]


def intersection_with(a: Iterable[T], b: Iterable[T], comp: Equality) -> list[T]:
    """
    Return the elements ``x`` of ``a`` for which some ``y`` in ``b`` has ``comp(x, y)``.

    Examples:
        >>> intersection_with([1, 1.2, 1.5, 3, 0], [1.9, 3, 0, 3.9],
        ...                   lambda a, b: round(a) == round(b))
        [1.5, 3, 0]
    """
    others = list(b)
    return [x for x in a if _matches_any(x, others, comp)]


def similarity(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Alias for intersection."""
    return intersection(a, b)


# =============================================================================
# Union
# =============================================================================


def union(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """
    Return every distinct value of ``a`` then ``b``, first occurrence wins.

    Examples:
        >>> union([1, 2, 3], [4, 3, 2])
        [1, 2, 3, 4]
    """
    return dedupe([*a, *b])


def union_by(a: Iterable[T], b: Iterable[T], fn: Projection) -> list[T]:
    """
    Return ``a`` plus the elements of ``b`` whose projection is new, deduplicated.

    Examples:
        >>> union_by([2.1], [1.2, 2.3], math.floor)
        [2.1, 1.2]
    """
    left = list(a)
    keys = Membership(fn(x) for x in left)
    return dedupe(left + [x for x in b if fn(x) not in keys])


def union_with(a: Iterable[T], b: Iterable[T], comp: Equality) -> list[T]:
    """
    Return ``a`` plus the elements of ``b`` matching nothing in ``a``, deduplicated.

    Examples:
        >>> union_with([1, 1.2, 1.5, 3, 0], [1.9, 3, 0, 3.9],
        ...            lambda a, b: round(a) == round(b))
        [1, 1.2, 1.5, 3, 0, 3.9]
    """
    left = list(a)
    return dedupe(left + [x for x in b if not _matches_any(x, left, comp)])


# =============================================================================
# Symmetric Difference
# =============================================================================


def symmetric_difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """
    Return the elements of ``a`` not in ``b``, followed by those of ``b`` not in ``a``.

    Duplicates within each segment are kept; see
    ``unique_symmetric_difference`` for the collapsed form.

    Examples:
        >>> symmetric_difference([1, 2, 3], [1, 2, 4])
        [3, 4]
        >>> symmetric_difference([1, 2, 2], [1, 3, 1])
        [2, 2, 3]
    """
    left, right = list(a), list(b)
    in_left, in_right = Membership(left), Membership(right)
    return [x for x in left if x not in in_right] + [x for x in right if x not in in_left]


def symmetric_difference_by(a: Iterable[T], b: Iterable[T], fn: Projection) -> list[T]:
    """
    Symmetric difference comparing projections.

    Examples:
        >>> symmetric_difference_by([2.1, 1.2], [2.3, 3.4], math.floor)
        [1.2, 3.4]
    """
    left, right = list(a), list(b)
    left_keys = [fn(x) for x in left]
    right_keys = [fn(x) for x in right]
    in_left, in_right = Membership(left_keys), Membership(right_keys)
    return [x for x, k in zip(left, left_keys) if k not in in_right] + [
        x for x, k in zip(right, right_keys) if k not in in_left
    ]


def symmetric_difference_with(a: Iterable[T], b: Iterable[T], comp: Equality) -> list[T]:
    """
    Symmetric difference using an equality comparator.

    ``comp`` is always called with the element under test first.

    Examples:
        >>> symmetric_difference_with([1, 1.2, 1.5, 3, 0], [1.9, 3, 0, 3.9],
        ...                           lambda a, b: round(a) == round(b))
        [1, 1.2, 3.9]
    """
    left, right = list(a), list(b)
    return [x for x in left if not _matches_any(x, right, comp)] + [
        x for x in right if not _matches_any(x, left, comp)
    ]


def unique_symmetric_difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """
    Symmetric difference with repeated values collapsed.

    Examples:
        >>> unique_symmetric_difference([1, 2, 2], [1, 3, 1])
        [2, 3]
    """
    return dedupe(symmetric_difference(a, b))


# =============================================================================
# Uniqueness
# =============================================================================


def unique(seq: Iterable[T]) -> list[T]:
    """Return unique elements preserving order."""
    return dedupe(seq)


def unique_by(seq: Iterable[T], comp: Equality) -> list[T]:
    """
    Keep the first element of every group the comparator considers equal.

    Example:
        unique_by(rows, lambda a, b: a["id"] == b["id"])
    """
    result: list[T] = []
    for value in seq:
        if not _matches_any(value, result, comp):
            result.append(value)
    return result


def unique_by_right(seq: Iterable[T], comp: Equality) -> list[T]:
    """
    Like ``unique_by`` but scanning from the right, so the last element wins.

    The result lists survivors in the order they were found, i.e. from the
    end of ``seq`` towards its start.
    """
    return unique_by(reversed(list(seq)), comp)


def filter_non_unique(seq: Iterable[T]) -> list[T]:
    """
    Return only the values that occur exactly once.

    Examples:
        >>> filter_non_unique([1, 2, 2, 3, 4, 4, 5])
        [1, 3, 5]
    """
    items = list(seq)
    seen, repeated = Membership(), Membership()
    for item in items:
        if not seen.add(item):
            repeated.add(item)
    return [item for item in items if item not in repeated]


def filter_non_unique_by(seq: Iterable[T], comp: Equality) -> list[T]:
    """Return the elements that no *other* element matches under ``comp``."""
    items = list(seq)
    return [
        value
        for i, value in enumerate(items)
        if not any(comp(value, other) for j, other in enumerate(items) if i != j)
    ]
