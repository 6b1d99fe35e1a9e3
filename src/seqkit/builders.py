"""
seqkit - Builders Module.

Constructors for new lists: inclusive numeric ranges, repeated values and
two-dimensional grids.
"""

from __future__ import annotations

import math
from typing import Any

from seqkit.errors import InvalidArgumentError


def _check_step(step: int | float, function: str) -> None:
    if step <= 0:
        raise InvalidArgumentError(
            "step must be positive", function=function, argument="step", value=step
        )


def _inclusive_length(end: int | float, start: int | float, step: int | float) -> int:
    return max(math.floor((end - start) / step) + 1, 0)


def range_inclusive(end: int | float, start: int | float = 0, step: int | float = 1) -> list:
    """
    Return ``start, start + step, ...`` up to and including ``end`` when reachable.

    Examples:
        >>> range_inclusive(5)
        [0, 1, 2, 3, 4, 5]
        >>> range_inclusive(7, 3)
        [3, 4, 5, 6, 7]
        >>> range_inclusive(9, 0, 2)
        [0, 2, 4, 6, 8]
    """
    _check_step(step, "range_inclusive")
    return [start + i * step for i in range(_inclusive_length(end, start, step))]


def range_inclusive_right(
    end: int | float, start: int | float = 0, step: int | float = 1
) -> list:
    """
    Same values as ``range_inclusive``, in descending order.

    Example:
        range_inclusive_right(9, 0, 2) -> [8, 6, 4, 2, 0]
    """
    _check_step(step, "range_inclusive_right")
    return range_inclusive(end, start, step)[::-1]


def repeat_value(n: int, value: Any = 0) -> list:
    """Return a list of ``n`` copies of ``value`` (empty for n <= 0)."""
    return [value] * max(n, 0)


def initialize_2d(width: int, height: int, value: Any = None) -> list[list[Any]]:
    """
    Build a ``height`` x ``width`` grid filled with ``value``.

    Every row is a distinct list, so mutating one row never affects another.

    Example:
        initialize_2d(2, 2, 0) -> [[0, 0], [0, 0]]
    """
    return [[value] * max(width, 0) for _ in range(max(height, 0))]
