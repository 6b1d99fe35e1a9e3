"""
seqkit - Filtering Module.

Element selection and removal helpers. Removal never happens in place:
the ``pull*`` functions return the surviving elements (and, for the
``pull_at_*`` forms, the removed ones) as new lists, leaving the caller's
sequence untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from seqkit.errors import InvalidArgumentError
from seqkit.membership import Membership

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

Predicate = Callable[[T], bool]


# =============================================================================
# Truthiness and Predicates
# =============================================================================


def compact(seq: Iterable[T]) -> list[T]:
    """Return the truthy elements."""
    return [x for x in seq if x]


def filter_falsy(seq: Iterable[T]) -> list[T]:
    """Alias for compact."""
    return compact(seq)


def reject(pred: Predicate, seq: Iterable[T]) -> list[T]:
    """Return the elements for which ``pred`` is false."""
    return [x for x in seq if not pred(x)]


def remove(pred: Predicate, seq: Iterable[T]) -> list[T]:
    """
    Return the elements for which ``pred`` is true.

    The input is not modified; this is the selection counterpart of
    ``reject``.
    """
    return [x for x in seq if pred(x)]


def every_nth(seq: Sequence[T], nth: int) -> list[T]:
    """
    Return every nth element, starting with the nth.

    Example:
        every_nth([1, 2, 3, 4, 5, 6], 2) -> [2, 4, 6]
    """
    if nth < 1:
        raise InvalidArgumentError(
            "nth must be at least 1", function="every_nth", argument="nth", value=nth
        )
    return list(seq)[nth - 1 :: nth]


# =============================================================================
# Removal
# =============================================================================


def without(seq: Iterable[T], *values: T) -> list[T]:
    """
    Return ``seq`` with every occurrence of the given values left out.

    Example:
        without([2, 1, 2, 3], 1, 2) -> [3]
    """
    excluded = Membership(values)
    return [x for x in seq if x not in excluded]


def pull(seq: Iterable[T], *values: T) -> list[T]:
    """
    Return the elements that remain after pulling out ``values``.

    Example:
        pull(["a", "b", "c", "a", "b", "c"], "a", "c") -> ["b", "b"]
    """
    return without(seq, *values)


def pull_at_index(seq: Sequence[T], *indexes: int) -> tuple[list[T], list[T]]:
    """
    Split ``seq`` into the elements kept and those at ``indexes``.

    Negative indexes count from the end, as with normal indexing; indexes
    outside the sequence are ignored.

    Returns:
        ``(kept, removed)``, both in the original order

    Examples:
        >>> pull_at_index(["a", "b", "c", "d"], 1, 3)
        (['a', 'c'], ['b', 'd'])
        >>> pull_at_index(["a", "b", "c"], 0, -1)
        (['b'], ['a', 'c'])
    """
    items = list(seq)
    n = len(items)
    targets = {i + n if i < 0 else i for i in indexes}
    kept: list[T] = []
    removed: list[T] = []
    for i, item in enumerate(items):
        (removed if i in targets else kept).append(item)
    return kept, removed


def pull_at_value(seq: Iterable[T], *values: T) -> tuple[list[T], list[T]]:
    """
    Split ``seq`` into the elements kept and those equal to one of ``values``.

    Example:
        pull_at_value(["a", "b", "c", "d"], "b", "d") -> (["a", "c"], ["b", "d"])
    """
    targets = Membership(values)
    kept: list[T] = []
    removed: list[T] = []
    for item in seq:
        (removed if item in targets else kept).append(item)
    return kept, removed


def pull_by(seq: Iterable[T], to_pull: Iterable[T], fn: Callable[[T], Any]) -> list[T]:
    """
    Return the elements whose projection matches no projection of ``to_pull``.

    Example:
        pull_by([{"x": 1}, {"x": 2}, {"x": 3}, {"x": 1}], [{"x": 1}, {"x": 3}],
                lambda o: o["x"]) -> [{"x": 2}]
    """
    keys = Membership(fn(x) for x in to_pull)
    return [x for x in seq if fn(x) not in keys]


# =============================================================================
# Searching
# =============================================================================


def find_last(seq: Iterable[T], pred: Predicate) -> T | None:
    """Return the last element matching ``pred``, or None."""
    found: T | None = None
    for item in seq:
        if pred(item):
            found = item
    return found


def find_last_index(seq: Sequence[T], pred: Predicate) -> int:
    """Return the index of the last element matching ``pred``, or -1."""
    for i in range(len(seq) - 1, -1, -1):
        if pred(seq[i]):
            return i
    return -1


def index_of_all(seq: Iterable[T], value: T) -> list[int]:
    """
    Return every index at which ``value`` occurs.

    Example:
        index_of_all([1, 2, 3, 1, 2, 3], 1) -> [0, 3]
    """
    return [i for i, item in enumerate(seq) if item == value]


def reduced_filter(
    rows: Iterable[Mapping[K, V]],
    keys: Iterable[K],
    pred: Callable[[Mapping[K, V]], bool],
) -> list[dict[K, V]]:
    """
    Filter mappings with ``pred`` and keep only the listed keys of each.

    Keys a row does not have are left out of that row's result.

    Example:
        reduced_filter(people, ["id", "name"], lambda p: p["age"] > 24)
    """
    wanted = list(keys)
    return [{key: row[key] for key in wanted if key in row} for row in rows if pred(row)]
