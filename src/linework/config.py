"""
config.py - Option records for the geometry generators and the CLI.

The records are frozen and validate on construction, so a generator that
receives one can trust its values.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .random_utils import to_number

Number = Union[int, float]

DEFAULT_SIZE = 10
DEFAULT_COUNT = 4


def _non_negative(value, name: str) -> Number:
    number = to_number(value, name)
    if number < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return number


@dataclass(frozen=True)
class ShapeConfig:
    """Bounding region and vertex count for box and polygon generators."""
    w: Number = DEFAULT_SIZE
    h: Number = DEFAULT_SIZE
    count: int = DEFAULT_COUNT

    def __post_init__(self):
        object.__setattr__(self, "w", _non_negative(self.w, "w"))
        object.__setattr__(self, "h", _non_negative(self.h, "h"))
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f"count must be an int, not {type(self.count).__name__}")
        if self.count < 1:
            raise ValueError(f"count must be >= 1, got {self.count}")


@dataclass(frozen=True)
class OffsetConfig:
    """Anchor point, region size and offset ratios for the offset quad.

    Each corner is pushed away from (x, y) by a random amount between
    `w * min_ratio` and `w * max_ratio` horizontally (`h` vertically).
    """
    w: Number
    h: Number
    x: Number
    y: Number
    min_ratio: Number
    max_ratio: Number

    def __post_init__(self):
        object.__setattr__(self, "w", _non_negative(self.w, "w"))
        object.__setattr__(self, "h", _non_negative(self.h, "h"))
        object.__setattr__(self, "x", to_number(self.x, "x"))
        object.__setattr__(self, "y", to_number(self.y, "y"))
        object.__setattr__(self, "min_ratio", to_number(self.min_ratio, "min"))
        object.__setattr__(self, "max_ratio", to_number(self.max_ratio, "max"))
        if self.min_ratio > self.max_ratio:
            raise ValueError(f"min must be <= max, got {self.min_ratio} > {self.max_ratio}")


@dataclass(frozen=True)
class LogConfig:
    """Logging options for the command-line entry point."""
    level: int = logging.INFO
    log_dir: Optional[Path] = None
    run_prefix: str = "linework"
