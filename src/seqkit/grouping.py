"""
seqkit - Grouping Module.

Functions that split, bucket, count or fold a sequence.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence, Sized
from typing import Any, TypeVar

from seqkit.errors import InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)


# =============================================================================
# Bucketing
# =============================================================================


def group_by(seq: Iterable[T], fn: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Group elements by the key ``fn`` assigns them.

    Groups appear in order of first key occurrence; each group keeps the
    original element order.

    Example:
        group_by([6.1, 4.2, 6.3], math.floor) -> {6: [6.1, 6.3], 4: [4.2]}
    """
    result: dict[K, list[T]] = {}
    for item in seq:
        result.setdefault(fn(item), []).append(item)
    return result


def count_by(seq: Iterable[T], fn: Callable[[T], K]) -> dict[K, int]:
    """
    Count elements per key.

    Example:
        count_by(["one", "two", "three"], len) -> {3: 2, 5: 1}
    """
    result: dict[K, int] = {}
    for item in seq:
        key = fn(item)
        result[key] = result.get(key, 0) + 1
    return result


def count_occurrences(seq: Iterable[T], value: T) -> int:
    """Count elements equal to ``value``."""
    return sum(1 for item in seq if item == value)


def map_object(seq: Iterable[K], fn: Callable[[K], U]) -> dict[K, U]:
    """
    Map each (hashable) element to ``fn(element)``.

    Example:
        map_object([1, 2, 3], lambda a: a * a) -> {1: 1, 2: 4, 3: 9}
    """
    return {item: fn(item) for item in seq}


# =============================================================================
# Splitting
# =============================================================================


def bifurcate(seq: Iterable[T], flags: Sequence[Any]) -> tuple[list[T], list[T]]:
    """
    Split by a parallel list of flags into (truthy-flagged, the rest).

    Elements past the end of ``flags`` count as unflagged.

    Example:
        bifurcate(["beep", "boop", "foo", "bar"], [True, True, False, True])
            -> (["beep", "boop", "bar"], ["foo"])
    """
    yes: list[T] = []
    no: list[T] = []
    for i, item in enumerate(seq):
        flagged = i < len(flags) and bool(flags[i])
        (yes if flagged else no).append(item)
    return yes, no


def bifurcate_by(seq: Iterable[T], pred: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    """Partition into (matching, not matching)."""
    yes: list[T] = []
    no: list[T] = []
    for item in seq:
        (yes if pred(item) else no).append(item)
    return yes, no


def partition(seq: Iterable[T], pred: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    """Alias for bifurcate_by."""
    return bifurcate_by(seq, pred)


def chunk(seq: Iterable[T], size: int) -> list[list[T]]:
    """
    Split into consecutive chunks of ``size``; the last may be shorter.

    Raises:
        InvalidArgumentError: If size is less than 1
    """
    if size < 1:
        raise InvalidArgumentError(
            "chunk size must be at least 1", function="chunk", argument="size", value=size
        )
    items = list(seq)
    return [items[i : i + size] for i in range(0, len(items), size)]


# =============================================================================
# Folding
# =============================================================================


def reduce_successive(
    seq: Iterable[T], fn: Callable[[U, T], U], initial: U
) -> list[U]:
    """
    Reduce, keeping every intermediate accumulator (starting with ``initial``).

    Example:
        reduce_successive([1, 2, 3], lambda acc, x: acc + x, 0) -> [0, 1, 3, 6]
    """
    results = [initial]
    acc = initial
    for item in seq:
        acc = fn(acc, item)
        results.append(acc)
    return results


def longest_item(*values: Sized) -> Sized:
    """
    Return the longest argument; the first one wins ties.

    Raises:
        InvalidArgumentError: If called without arguments
    """
    if not values:
        raise InvalidArgumentError("at least one value is required", function="longest_item")
    best = values[0]
    for value in values[1:]:
        if len(value) > len(best):
            best = value
    return best


def join(seq: Iterable[Any], separator: str = ",", end: str | None = None) -> str:
    """
    Join elements as strings, using ``end`` before the final element.

    Examples:
        >>> join(["pen", "pineapple", "apple", "pen"], ", ", " & ")
        'pen, pineapple, apple & pen'
        >>> join(["pen", "pineapple", "apple", "pen"])
        'pen,pineapple,apple,pen'
    """
    parts = [str(item) for item in seq]
    if end is None or len(parts) < 2:
        return separator.join(parts)
    return separator.join(parts[:-1]) + end + parts[-1]
