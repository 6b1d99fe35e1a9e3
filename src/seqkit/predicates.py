"""
seqkit - Predicates Module.

Whole-sequence boolean checks. The predicate defaults to ``bool``, so the
bare forms test truthiness.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def all_of(seq: Iterable[T], pred: Callable[[T], Any] = bool) -> bool:
    """Return True if ``pred`` holds for every element (True when empty)."""
    return all(pred(item) for item in seq)


def any_of(seq: Iterable[T], pred: Callable[[T], Any] = bool) -> bool:
    """Return True if ``pred`` holds for at least one element."""
    return any(pred(item) for item in seq)


def none_of(seq: Iterable[T], pred: Callable[[T], Any] = bool) -> bool:
    """Return True if ``pred`` holds for no element."""
    return not any_of(seq, pred)


def all_equal(seq: Iterable[T]) -> bool:
    """
    Check if every element equals the first one.

    Example:
        all_equal([1, 1, 1]) -> True
        all_equal([]) -> True
    """
    iterator = iter(seq)
    for first in iterator:
        return all(item == first for item in iterator)
    return True
