"""Eager helpers built on top of the lazy walkers."""

from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np

from gridline.src.core.point import Point, as_point
from gridline.src.walker.bresenham import Bresenham, BresenhamInclusive

__all__ = ["line_points", "walk_length", "line_array", "polyline_points"]

logger = logging.getLogger(__name__)


def line_points(start, end, inclusive: bool = False) -> List[Point]:
    """Return the points of the segment ``start`` -> ``end`` as a list."""
    walker = BresenhamInclusive(start, end) if inclusive else Bresenham(start, end)
    return list(walker)


def walk_length(start, end, inclusive: bool = False) -> int:
    """Return how many points a walk from ``start`` to ``end`` produces.

    This is the number of unit steps along the dominant axis, plus one for
    the inclusive variant.
    """
    start = as_point(start)
    end = as_point(end)
    steps = max(abs(end.x - start.x), abs(end.y - start.y))
    return steps + 1 if inclusive else steps


def line_array(start, end, inclusive: bool = True) -> np.ndarray:
    """Return the segment as an integer ``numpy`` array of shape ``(n, 2)``.

    Columns hold ``x`` and ``y`` so the result can be used for fancy
    indexing, e.g. ``grid[pts[:, 1], pts[:, 0]]``.
    """
    pts = line_points(start, end, inclusive=inclusive)
    return np.array(pts, dtype=np.int64).reshape(-1, 2)


def polyline_points(vertices: Iterable, closed: bool = False) -> List[Point]:
    """Return the points of a chain of segments through ``vertices``.

    Shared vertices are produced once. With ``closed`` the chain returns to
    the first vertex, which is not repeated at the end.
    """
    verts = [as_point(v) for v in vertices]
    if not verts:
        return []
    if len(verts) == 1:
        return [verts[0]]

    edges = list(zip(verts, verts[1:]))
    if closed:
        edges.append((verts[-1], verts[0]))

    points: List[Point] = []
    for a, b in edges:
        points.extend(Bresenham(a, b))
    if not closed or not points:
        points.append(verts[-1])

    logger.debug("polyline with %d vertices produced %d points", len(verts), len(points))
    return points
