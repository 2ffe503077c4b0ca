"""
array_utils.py
--------------

List helpers built on the random primitives: filling, shuffling,
sampling without replacement and numeric sorting.
"""

from __future__ import annotations

__all__ = [
    "populate_array",
    "populate_array_random_int",
    "shuffle_array",
    "populate_array_random_int_unique",
    "sort_array",
]

import math
from typing import Any, List, MutableSequence, Optional, TypeVar

from .rng import RNG, get_rng
from .random_utils import random_int, to_number

T = TypeVar("T")


def _check_count(count: Any, name: str = "count") -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"{name} must be an int, not {type(count).__name__}")
    if count < 0:
        raise ValueError(f"{name} must be >= 0, got {count}")
    return count


def populate_array(value: T, count: int) -> List[T]:
    """List of `count` slots all referring to the same `value` object."""
    return [value] * _check_count(count)


def populate_array_random_int(min: Any, max: Any, count: int,
                              *, rng: Optional[RNG] = None) -> List[int]:
    return [random_int(min, max, rng=rng) for _ in range(_check_count(count))]


def shuffle_array(seq: MutableSequence[T], *, rng: Optional[RNG] = None) -> MutableSequence[T]:
    """Fisher-Yates shuffle of `seq` in place; returns the same object."""
    source = get_rng() if rng is None else rng
    for i in range(len(seq) - 1, 0, -1):
        j = math.floor(source.random() * (i + 1))
        seq[i], seq[j] = seq[j], seq[i]
    return seq


def populate_array_random_int_unique(min: int, max: int, length: Optional[int] = None,
                                     *, rng: Optional[RNG] = None) -> List[int]:
    """Distinct integers drawn without replacement from [min, max).

    Args:
        min: First value of the range (inclusive).
        max: End of the range (exclusive).
        length: Number of values to return. ``None`` or ``0`` means `max`,
            which is the whole range whenever `min >= 0`. Values larger than
            the range are capped at the range size.

    Returns:
        list[int]: Shuffled, pairwise-distinct integers.
    """
    lo = math.ceil(to_number(min, "min"))
    hi = math.ceil(to_number(max, "max"))
    if not length:
        length = hi if hi > 0 else 0
    length = _check_count(length, "length")
    values = list(range(lo, hi))
    shuffle_array(values, rng=rng)
    return values[:length]


def sort_array(seq: List[Any]) -> List[Any]:
    """Sort `seq` ascending by numeric value, in place."""
    seq.sort(key=to_number)
    return seq
