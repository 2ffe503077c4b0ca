"""
geometry.py
-----------

Procedural point generators for decorative line art.

  0,0 --------- 1,0
   |  1,1 - 1,8  |
   |  |       |  |
   |  8,1 - 8,8  |
  0,1 --------- 1,1

Outputs are scaled by the bounding region (w, h); with the default 10x10
region points fall inside a 100x100 canvas.
"""

from __future__ import annotations

__all__ = [
    "RING_X",
    "RING_Y",
    "Point",
    "get_random_box",
    "get_random_polygon",
    "get_polygon_with_offset",
    "box_points",
    "polygon_points",
    "offset_quad_points",
    "format_point",
]

import math
import logging
from typing import List, Optional, Tuple, Union

from .rng import RNG
from .config import DEFAULT_COUNT, DEFAULT_SIZE, OffsetConfig, ShapeConfig
from .random_utils import random_int, random_number, round_to
from .array_utils import sort_array

# =============================================================================
# Constants
# =============================================================================
LOGGER_NAME = "linework"
# Ten anchors (in tenths of the region) tracing a loop just inside the border.
RING_X = (1, 2, 4, 7, 8, 8, 7, 4, 2, 1)
RING_Y = (4, 7, 8, 8, 7, 4, 2, 1, 1, 2)
RING_CELL = 0.1
MAX_ANGLE_JITTER = 0.01
POLYGON_SCALE = 5
POLYGON_DECIMALS = 2

Number = Union[int, float]
Point = Tuple[Number, Number]


# =============================================================================
# Box
# =============================================================================
def box_points(config: ShapeConfig, rng: Optional[RNG] = None) -> List[Point]:
    """Points near the ring anchors, one ring bucket per slice of `count`.

    Point `i` uses bucket `floor(i / (count * 0.1))`, evaluated in floating
    point, so `count=6` visits buckets 0, 1, 3, 4, 6, 8. The index is capped
    at the last ring entry.
    """
    w, h, count = config.w, config.h, config.count
    last = len(RING_X) - 1
    points: List[Point] = []
    for i in range(count):
        index = min(math.floor(i / (count * RING_CELL)), last)
        x = random_int(w * RING_X[index], w * (RING_X[index] + RING_CELL), rng=rng)
        y = random_int(h * RING_Y[index], h * (RING_Y[index] + RING_CELL), rng=rng)
        points.append((x, y))
    logging.getLogger(LOGGER_NAME).debug(f"box_points(): {points}")
    return points


def get_random_box(w: Number = DEFAULT_SIZE, h: Number = DEFAULT_SIZE,
                   count: int = DEFAULT_COUNT, *, rng: Optional[RNG] = None) -> List[Point]:
    """Return `count` integer points spread around the inside of a box.

    Raises:
        ValueError: if `count < 1`, `w`/`h` is negative, or the region is too
            small for a ring cell to contain an integer coordinate.
    """
    return box_points(ShapeConfig(w, h, count), rng=rng)


# =============================================================================
# Polygon
# =============================================================================
def polygon_points(config: ShapeConfig, rng: Optional[RNG] = None) -> List[Point]:
    w, h, count = config.w, config.h, config.count

    angles = [
        2 * math.pi * (i / count) + random_number(-MAX_ANGLE_JITTER, MAX_ANGLE_JITTER, rng=rng)
        for i in range(count)
    ]
    sort_array(angles)

    r = ((w + h) / 2) * POLYGON_SCALE
    cx, cy = w * POLYGON_SCALE, h * POLYGON_SCALE

    points: List[Point] = [
        (round_to(cx + r * math.cos(angle), POLYGON_DECIMALS),
         round_to(cy + r * math.sin(angle), POLYGON_DECIMALS))
        for angle in angles
    ]
    logging.getLogger(LOGGER_NAME).debug(f"polygon_points(): {points}")
    return points


def get_random_polygon(w: Number = DEFAULT_SIZE, h: Number = DEFAULT_SIZE,
                       count: int = DEFAULT_COUNT, *, rng: Optional[RNG] = None) -> List[Point]:
    """Return `count` vertices of a slightly wobbly regular polygon.

    Vertices lie on a circle of radius ``((w + h) / 2) * 5`` centered at
    ``(w * 5, h * 5)``. Each vertex angle is an even slice of the circle
    plus jitter in [-0.01, 0.01); angles are sorted numerically before
    use, so neighbouring jittered slices may swap order.
    """
    return polygon_points(ShapeConfig(w, h, count), rng=rng)


# =============================================================================
# Offset quadrilateral
# =============================================================================
def format_point(x: Number, y: Number) -> str:
    """Format a pair as ``"X,Y"``; integral floats lose their ``.0``."""
    def fmt(v: Number) -> str:
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)
    return f"{fmt(x)},{fmt(y)}"


def offset_quad_points(config: OffsetConfig, rng: Optional[RNG] = None) -> List[str]:
    c = config
    # (x sign, y sign) for top-left, top-right, bottom-right, bottom-left
    corners = ((-1, -1), (1, -1), (1, 1), (-1, 1))
    points = []
    for sx, sy in corners:
        dx = random_int(c.w * c.min_ratio, c.w * c.max_ratio, rng=rng)
        dy = random_int(c.h * c.min_ratio, c.h * c.max_ratio, rng=rng)
        points.append(format_point(c.x + sx * dx, c.y + sy * dy))
    logging.getLogger(LOGGER_NAME).debug(f"offset_quad_points(): {points}")
    return points


def get_polygon_with_offset(w: Number, h: Number, x: Number, y: Number,
                            min: Number, max: Number,
                            *, rng: Optional[RNG] = None) -> List[str]:
    """Return four ``"X,Y"`` corners pushed outward from the anchor (x, y).

    Order is top-left, top-right, bottom-right, bottom-left, ready to be
    joined into an SVG ``points`` attribute.
    """
    return offset_quad_points(OffsetConfig(w, h, x, y, min, max), rng=rng)
