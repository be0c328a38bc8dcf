"""Integer line rasterisation primitives."""

from .core import (
    ConfigError,
    GridlineError,
    InvalidOctantError,
    InvalidPointError,
    Point,
    as_point,
)
from .octant import Octant
from .walker import (
    Bresenham,
    BresenhamInclusive,
    line_array,
    line_points,
    polyline_points,
    walk_length,
)

__all__ = [
    "Point",
    "as_point",
    "Octant",
    "Bresenham",
    "BresenhamInclusive",
    "line_points",
    "line_array",
    "polyline_points",
    "walk_length",
    "GridlineError",
    "InvalidPointError",
    "InvalidOctantError",
    "ConfigError",
]
