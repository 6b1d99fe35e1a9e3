"""
seqkit - Zipping Module.

Positional combination of sequences. In contrast to the builtin ``zip``,
``seqkit.zip`` runs to the *longest* input and marks the holes left by
shorter inputs with ``ABSENT`` (or a caller-chosen ``fill``), so "this
sequence had ended" is never confused with a real ``None`` or ``0``.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from enum import Enum
from itertools import product, zip_longest
from typing import Any, Literal

from seqkit.errors import InvalidArgumentError

RaggedPolicy = Literal["omit", "pad"]


class Absent(Enum):
    """Marker type for positions that a ragged input does not reach."""

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent.ABSENT


def _check_ragged(ragged: str, function: str) -> None:
    if ragged not in ("omit", "pad"):
        raise InvalidArgumentError(
            "ragged must be 'omit' or 'pad'",
            function=function,
            argument="ragged",
            value=ragged,
        )


# =============================================================================
# Zip
# =============================================================================


def zip(*seqs: Iterable[Any], fill: Any = ABSENT) -> list[list[Any]]:
    """
    Group the i-th elements of every input, up to the longest input.

    Args:
        *seqs: Sequences to combine
        fill: Value used where a shorter input has no element

    Returns:
        A list of rows, one per position; ``[]`` when called without inputs

    Examples:
        >>> zip(["a", "b"], [1, 2], [True, False])
        [['a', 1, True], ['b', 2, False]]
        >>> zip(["a"], [1, 2])
        [['a', 1], [ABSENT, 2]]
    """
    return [list(row) for row in zip_longest(*seqs, fillvalue=fill)]


def zip_with(fn: Callable[..., Any], *seqs: Iterable[Any], fill: Any = ABSENT) -> list[Any]:
    """
    Apply ``fn`` to each positional group instead of collecting it.

    Example:
        zip_with(lambda a, b, c: a + b + c, [1, 2], [10, 20], [100, 200]) -> [111, 222]
    """
    return [fn(*row) for row in zip_longest(*seqs, fillvalue=fill)]


# =============================================================================
# Unzip
# =============================================================================


def unzip(
    rows: Iterable[Sequence[Any]],
    fill: Any = ABSENT,
    ragged: RaggedPolicy = "omit",
) -> list[list[Any]]:
    """
    Split rows back into one list per position.

    The result has as many lists as the longest row has elements. How
    shorter rows are treated is chosen explicitly:

    - ``ragged="omit"`` (default): a short row contributes nothing at the
      positions it lacks, so later columns may be shorter;
    - ``ragged="pad"``: every column has one entry per row, with ``fill``
      at missing positions, exactly mirroring ``zip``.

    Args:
        rows: Sequences of values (not modified)
        fill: Padding value for ``ragged="pad"``
        ragged: ``"omit"`` or ``"pad"``

    Raises:
        InvalidArgumentError: If ``ragged`` is not a known policy

    Examples:
        >>> unzip([["a", 1, True], ["b", 2, False]])
        [['a', 'b'], [1, 2], [True, False]]
        >>> unzip([["a", 1, True], ["b", 2]])
        [['a', 'b'], [1, 2], [True]]
        >>> unzip([["a", 1, True], ["b", 2]], ragged="pad")
        [['a', 'b'], [1, 2], [True, ABSENT]]
    """
    _check_ragged(ragged, "unzip")
    rows = [list(row) for row in rows]
    width = max((len(row) for row in rows), default=0)
    if ragged == "pad":
        return [[row[i] if i < len(row) else fill for row in rows] for i in range(width)]
    return [[row[i] for row in rows if i < len(row)] for i in range(width)]


def unzip_with(
    rows: Iterable[Sequence[Any]],
    fn: Callable[..., Any],
    fill: Any = ABSENT,
    ragged: RaggedPolicy = "omit",
) -> list[Any]:
    """
    Unzip, then apply ``fn`` to each column.

    Example:
        unzip_with([[1, 10, 100], [2, 20, 200]], lambda *xs: sum(xs)) -> [3, 30, 300]
    """
    return [fn(*column) for column in unzip(rows, fill=fill, ragged=ragged)]


# =============================================================================
# Products and Mappings
# =============================================================================


def cartesian_product(*seqs: Iterable[Any]) -> list[tuple[Any, ...]]:
    """
    Compute every ordered combination of the inputs (A x B x ...).

    Combinations are produced in row-major order: the first input varies
    slowest. Unlike a set-based product, duplicates and order are kept.

    Examples:
        >>> cartesian_product([1, 2], ["a", "b"])
        [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]
        >>> cartesian_product()
        []
    """
    if not seqs:
        return []
    return list(product(*seqs))


def x_prod(a: Iterable[Any], b: Iterable[Any]) -> list[tuple[Any, Any]]:
    """Cartesian product of exactly two sequences."""
    return cartesian_product(a, b)


def zip_object(
    keys: Iterable[Hashable], values: Sequence[Any], fill: Any = ABSENT
) -> dict[Hashable, Any]:
    """
    Pair keys with values by position; keys without a value map to ``fill``.

    Example:
        zip_object(["a", "b", "c"], [1, 2]) -> {"a": 1, "b": 2, "c": ABSENT}
    """
    values = list(values)
    return {key: values[i] if i < len(values) else fill for i, key in enumerate(keys)}
