"""
Value-membership index used by the set-algebra helpers.

Hashable values go into a ``set`` for O(1) lookups. Unhashable values
(lists, dicts, sets) cannot be hashed, so they are kept in a side list and
compared with ``==``; only those values pay the linear cost.

Top-level ``bool`` values are keyed apart from numbers, and every float NaN
shares one key.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from typing import Any

logger = logging.getLogger(__name__)

_NAN = object()


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _key(value: Any) -> tuple[bool, Any]:
    if isinstance(value, float) and math.isnan(value):
        return (False, _NAN)
    return (type(value) is bool, value)


class Membership:
    """
    An insertion-ordered collection answering ``value in index``.

    Numbers compare by value across ``int`` and ``float`` (``1`` and ``1.0``
    are the same member) but ``True`` and ``False`` are never equal to
    ``1`` and ``0``. All NaNs are one member. ``"1"`` is not ``1``.
    """

    __slots__ = ("_hashed", "_unhashable", "_order")

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._hashed: set[tuple[bool, Any]] = set()
        self._unhashable: list[Any] = []
        self._order: list[Any] = []
        for value in values:
            self.add(value)

    def __contains__(self, value: Any) -> bool:
        if _is_hashable(value):
            return _key(value) in self._hashed
        return value in self._unhashable

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._order)

    def __repr__(self) -> str:
        return f"Membership({self._order!r})"

    def add(self, value: Any) -> bool:
        """Add a value; return True if it was not already a member."""
        if _is_hashable(value):
            key = _key(value)
            if key in self._hashed:
                return False
            self._hashed.add(key)
        else:
            if value in self._unhashable:
                return False
            if not self._unhashable:
                logger.debug(
                    "Unhashable %s value; falling back to linear scan",
                    type(value).__name__,
                )
            self._unhashable.append(value)
        self._order.append(value)
        return True


def dedupe(values: Iterable[Any]) -> list[Any]:
    """
    Return values with repeats removed, keeping first occurrences.

    Example:
        dedupe([1, 2, 2, [3], [3]]) -> [1, 2, [3]]
    """
    return list(Membership(values))
