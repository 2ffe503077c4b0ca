from .rng import RNG, get_rng, set_global_seed
from .random_utils import (
    Rgb, to_number, round_to, random_number, random_float, random_int,
    random_rgb, random_hex_from_string, random_hex, random_from_array,
)
from .array_utils import (
    populate_array, populate_array_random_int, shuffle_array,
    populate_array_random_int_unique, sort_array,
)
from .config import ShapeConfig, OffsetConfig, LogConfig
from .geometry import (
    RING_X, RING_Y, get_random_box, get_random_polygon, get_polygon_with_offset,
)
from .shapes import Shape, RandomBox, RandomPolygon, OffsetQuad
from .logging_utils import configure_logging


__all__ = [
    "rng",
    "random_utils",
    "array_utils",
    "config",
    "geometry",
    "shapes",
    "logging_utils",
]
