"""
shapes.py
---------

Reusable shape objects wrapping the geometry generators.

A shape holds the metadata of its last generation (options plus points)
and hands the points to a drawing layer as an SVG ``points`` string or a
closed Matplotlib path. Nothing here draws.
"""

from __future__ import annotations

__all__ = ["Shape", "RandomBox", "RandomPolygon", "OffsetQuad",]

import copy
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Any, Dict, List, Optional

import numpy as np
from matplotlib.path import Path

from .rng import RNG, get_rng
from .config import OffsetConfig, ShapeConfig
from .geometry import Point, box_points, format_point, offset_quad_points, polygon_points

LOGGER_NAME = "linework"


class Shape(ABC):
    """
    Abstract base class for generated point shapes.

    Design:
      One instance can be kept and regenerated repeatedly with
      `make_geometry(**kwargs)`; each call replaces the metadata in place.
      All instances of all subclasses draw from one class-level RNG, which
      `reseed()` resets for deterministic replay.
    """

    __slots__ = ("_meta",)

    kind: str = "shape"
    rng: RNG = get_rng(thread_safe=True)

    def __init__(self, **kwargs: Any) -> None:
        self._meta: Dict[str, Any] = {}
        self.make_geometry(**kwargs)

    def reset(self) -> Shape:
        logging.getLogger(LOGGER_NAME).debug(f"Running {self.__class__.__name__} reset().")
        self._meta = {}
        return self

    # -------------------------------------------------------------------------
    # Abstract interface
    # -------------------------------------------------------------------------
    @abstractmethod
    def make_geometry(self, **kwargs: Any) -> Shape:
        """Regenerate points and metadata. Subclasses must override this."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Metadata accessors
    # -------------------------------------------------------------------------
    @property
    def meta(self) -> Dict[str, Any]:
        """Deep copy of the current metadata (safe to mutate)."""
        return copy.deepcopy(self._meta)

    @property
    def points(self) -> List[Point]:
        return list(self._meta.get("points", []))

    @property
    def json(self) -> str:
        """JSON-encoded metadata string (sorted, compact)."""
        return json.dumps(self._meta, sort_keys=True, separators=(",", ":"), default=str)

    @property
    def jsonpp(self) -> str:
        """Pretty-printed JSON (for debugging / logs)."""
        return json.dumps(self._meta, sort_keys=True, indent=4, default=str)

    @property
    def svg_points(self) -> str:
        """Points joined as an SVG ``points`` attribute: ``"x1,y1 x2,y2 ..."``."""
        return " ".join(format_point(x, y) for x, y in self.points)

    def as_path(self) -> Path:
        """Closed Matplotlib path through the points."""
        points = self.points
        if not points:
            raise ValueError("shape has no points; call make_geometry() first")
        vertices = np.asarray(points + points[:1], dtype=float)
        return Path(vertices, closed=True)

    @classmethod
    def reseed(cls, seed: Optional[int] = None) -> None:
        """Re-seed the shared RNG (for deterministic replay)."""
        cls.rng.seed(seed)

    # ---------------------------------------------------------------------------
    # Representation
    # ---------------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} keys={list(self._meta.keys())}>"

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={hex(id(self))}):\n{self.jsonpp}"


class RandomBox(Shape):
    """Points scattered along the inside of a box (see `get_random_box`)."""

    __slots__ = ()
    kind = "box"

    def make_geometry(self, **kwargs: Any) -> RandomBox:
        config = ShapeConfig(**kwargs)
        self.reset()
        self._meta = {"kind": self.kind, **asdict(config),
                      "points": box_points(config, rng=self.rng)}
        return self


class RandomPolygon(Shape):
    """Jittered regular polygon (see `get_random_polygon`)."""

    __slots__ = ()
    kind = "polygon"

    def make_geometry(self, **kwargs: Any) -> RandomPolygon:
        config = ShapeConfig(**kwargs)
        self.reset()
        self._meta = {"kind": self.kind, **asdict(config),
                      "points": polygon_points(config, rng=self.rng)}
        return self


class OffsetQuad(Shape):
    """
    Quadrilateral around an anchor point (see `get_polygon_with_offset`).

    Metadata keeps the formatted ``"X,Y"`` corners as produced, next to the
    same corners parsed back into numeric points.
    """

    __slots__ = ()
    kind = "offset_quad"

    def make_geometry(self, w=10, h=10, x=50, y=50,
                      min_ratio=0.1, max_ratio=0.2) -> OffsetQuad:
        config = OffsetConfig(w, h, x, y, min_ratio, max_ratio)
        self.reset()
        corners = offset_quad_points(config, rng=self.rng)
        self._meta = {
            "kind": self.kind,
            **asdict(config),
            "corners": corners,
            "points": [_parse_corner(c) for c in corners],
        }
        return self


def _parse_corner(corner: str) -> Point:
    x, y = corner.split(",")
    return (float(x), float(y))
