"""
random_utils.py
---------------

Scalar random primitives: rounding, uniform numbers, integers and colors.

All draws are taken from `RNG.random()` so that a seeded `RNG` passed as
`rng=` makes every result reproducible. Without it the shared process-wide
source from `get_rng()` is used.
"""

from __future__ import annotations

__all__ = [
    "Rgb",
    "HEX_CHARS",
    "to_number",
    "round_to",
    "random_number",
    "random_float",
    "random_int",
    "random_rgb",
    "random_hex_from_string",
    "random_hex",
    "random_from_array",
]

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Optional, Sequence, Tuple, TypeVar

from matplotlib import colors

from .rng import RNG, get_rng

T = TypeVar("T")
Range = Tuple[Any, Any]

HEX_CHARS = "0123456789abcdef"
MAX_RGB_INT = 0xFFFFFF


@dataclass(frozen=True)
class Rgb:
    """8-bit RGB color record."""
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return colors.to_hex(self.to_mpl())

    def to_mpl(self) -> Tuple[float, float, float]:
        """Color as a Matplotlib RGB tuple with channels in [0, 1]."""
        return (self.r / 255, self.g / 255, self.b / 255)

    def as_dict(self) -> dict[str, int]:
        return {"r": self.r, "g": self.g, "b": self.b}


def _source(rng: Optional[RNG]) -> RNG:
    return get_rng() if rng is None else rng


def to_number(value: Any, name: str = "value") -> float:
    """Parse `value` as a finite real number.

    Accepts ints, floats, NumPy scalars and numeric strings.

    Raises:
        TypeError: for bools, None and other non-numeric types.
        ValueError: for unparsable strings and non-finite values.
    """
    if isinstance(value, bool) or value is None:
        raise TypeError(f"{name} must be a number, not {type(value).__name__}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValueError(f"{name} is not a number: {value!r}") from None
    else:
        raise TypeError(f"{name} must be a number, not {type(value).__name__}")
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return number


def round_to(value: Any, decimals: int = 0) -> float:
    """Round to `decimals` places, halves toward +inf.

    >>> round_to(3.14159, 2)
    3.14
    >>> round_to(2.5)
    3.0
    >>> round_to(-2.5)
    -2.0
    """
    p = 10 ** decimals
    return math.floor(to_number(value) * p + 0.5) / p


def random_number(min: Any, max: Any, *, rng: Optional[RNG] = None) -> float:
    """Uniform float in [min, max)."""
    lo = to_number(min, "min")
    hi = to_number(max, "max")
    return _source(rng).random() * (hi - lo) + lo


def random_float(min: Any = 0, max: Any = 1, *, rng: Optional[RNG] = None) -> float:
    """Uniform float in [min, max + 1).

    The span is one unit wider than `max - min`; callers that need a plain
    half-open interval should use `random_number`.
    """
    lo = to_number(min, "min")
    hi = to_number(max, "max")
    return _source(rng).random() * (hi - lo + 1) + lo


def random_int(min: Any, max: Any, *, rng: Optional[RNG] = None) -> int:
    """Uniform integer in [ceil(min), floor(max)], both ends inclusive.

    Raises:
        ValueError: if no integer lies between `min` and `max`.
    """
    lo = math.ceil(to_number(min, "min"))
    hi = math.floor(to_number(max, "max"))
    if lo > hi:
        raise ValueError(f"no integer in range [{min}, {max}]")
    return math.floor(_source(rng).random() * (hi - lo + 1)) + lo


def random_rgb(r_range: Range = (0, 255),
               g_range: Range = (0, 255),
               b_range: Range = (0, 255),
               *, rng: Optional[RNG] = None) -> Rgb:
    return Rgb(
        r=random_int(r_range[0], r_range[1], rng=rng),
        g=random_int(g_range[0], g_range[1], rng=rng),
        b=random_int(b_range[0], b_range[1], rng=rng),
    )


def random_hex_from_string(*, rng: Optional[RNG] = None) -> str:
    """Six independent hex digits, e.g. ``"3fa09c"`` (no leading ``#``)."""
    last = len(HEX_CHARS) - 1
    return "".join(HEX_CHARS[random_int(0, last, rng=rng)] for _ in range(6))


def random_hex(*, rng: Optional[RNG] = None) -> str:
    """Random ``"#rrggbb"`` color, zero-padded to six digits."""
    return f"#{random_int(0, MAX_RGB_INT, rng=rng):06x}"


def random_from_array(seq: Sequence[T], *, rng: Optional[RNG] = None) -> T:
    if not len(seq):
        raise IndexError("cannot choose from an empty sequence")
    return seq[math.floor(_source(rng).random() * len(seq))]
