import json
import math

import pytest
from matplotlib.path import Path

from linework.shapes import Shape, RandomBox, RandomPolygon, OffsetQuad


@pytest.fixture
def box():
  return RandomBox(count=10)


@pytest.fixture
def polygon():
  return RandomPolygon(w=10, h=10, count=6)


# A. Metadata structure

def test_box_meta_structure(box):
  meta = box.meta
  assert set(meta) == {"kind", "w", "h", "count", "points"}
  assert meta["kind"] == "box"
  assert len(meta["points"]) == 10


def test_offset_quad_meta_structure():
  quad = OffsetQuad(w=10, h=10, x=50, y=50, min_ratio=0.1, max_ratio=0.2)
  meta = quad.meta
  assert meta["kind"] == "offset_quad"
  assert len(meta["corners"]) == 4
  for corner, (x, y) in zip(meta["corners"], meta["points"]):
    assert corner == f"{x:g},{y:g}"


def test_shape_is_abstract():
  with pytest.raises(TypeError):
    Shape()


def test_meta_returns_deepcopy(box):
  meta = box.meta
  meta["points"].append((-1, -1))
  assert len(box.meta["points"]) == 10


def test_make_geometry_returns_self_and_regenerates(polygon):
  before = polygon.points
  out = polygon.make_geometry(w=20, h=20, count=3)
  assert out is polygon
  assert len(polygon.points) == 3
  assert polygon.points != before


def test_invalid_options_leave_shape_untouched(box):
  before = box.meta
  with pytest.raises(ValueError):
    box.make_geometry(count=0)
  assert box.meta == before


def test_reset_clears_meta(box):
  assert box.reset() is box
  assert box.meta == {}
  assert box.points == []


# B. Serialization

def test_json_roundtrip(polygon):
  data = json.loads(polygon.json)
  assert data["kind"] == "polygon"
  assert len(data["points"]) == 6
  assert json.loads(polygon.jsonpp) == data


def test_repr_and_str(box):
  text = repr(box)
  for key in ("kind", "points"):
    assert key in text
  assert str(box).startswith("RandomBox(id=")


# C. Drawing-layer views

def test_svg_points(polygon):
  parts = polygon.svg_points.split(" ")
  assert len(parts) == 6
  for part, (x, y) in zip(parts, polygon.points):
    px, py = (float(v) for v in part.split(","))
    assert (px, py) == (x, y)


def test_as_path_is_closed(polygon):
  path = polygon.as_path()
  assert isinstance(path, Path)
  assert path.vertices.shape == (7, 2)
  assert path.codes[0] == Path.MOVETO
  assert path.codes[-1] == Path.CLOSEPOLY


def test_as_path_requires_points(box):
  box.reset()
  with pytest.raises(ValueError):
    box.as_path()


def test_polygon_shape_points_on_circle(polygon):
  for x, y in polygon.points:
    assert math.hypot(x - 50, y - 50) == pytest.approx(50, abs=0.01)


# D. Determinism

@pytest.mark.parametrize("cls, kwargs", [
    (RandomBox, dict(count=10)),
    (RandomPolygon, dict(count=5)),
    (OffsetQuad, dict()),
])
def test_reseed_reproduces_metadata(cls, kwargs):
  cls.reseed(123)
  m1 = cls(**kwargs).meta
  cls.reseed(123)
  m2 = cls(**kwargs).meta
  assert m1 == m2


def test_reseed_is_shared_by_all_shapes():
  Shape.reseed(7)
  a = RandomBox(count=10).meta
  RandomBox.reseed(7)
  b = RandomBox(count=10).meta
  assert a == b
