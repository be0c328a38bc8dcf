"""Incremental integer line walkers."""

from .bresenham import Bresenham, BresenhamInclusive
from .helpers import line_array, line_points, polyline_points, walk_length

__all__ = [
    "Bresenham",
    "BresenhamInclusive",
    "line_points",
    "line_array",
    "polyline_points",
    "walk_length",
]
