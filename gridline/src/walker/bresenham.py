"""Iterator based integer line walking.

The walkers compute the lattice points of a segment incrementally with an
integer error accumulator, one point per ``next`` call. They know nothing about
grids or colours; callers decide what to do with each coordinate::

    >>> list(Bresenham((0, 1), (6, 4)))
    [Point(x=0, y=1), Point(x=1, y=1), Point(x=2, y=2), Point(x=3, y=2), Point(x=4, y=3), Point(x=5, y=3)]
"""

from __future__ import annotations

import logging
from typing import Iterator

from gridline.src.core.point import Point, as_point
from gridline.src.octant.octant import Octant

__all__ = ["Bresenham", "BresenhamInclusive"]

logger = logging.getLogger(__name__)


class Bresenham:
    """Walk from ``start`` towards ``end``, excluding ``end`` itself.

    The iterator is forward only: once exhausted it cannot be restarted. A
    segment with ``start == end`` yields nothing.
    """

    __slots__ = ("x", "y", "dx", "dy", "x1", "diff", "octant")

    def __init__(self, start, end) -> None:
        start = as_point(start)
        end = as_point(end)
        octant = Octant.from_points(start, end)

        start_c = octant.to_canonical(start)
        end_c = octant.to_canonical(end)

        dx = end_c.x - start_c.x
        dy = end_c.y - start_c.y

        self.x = start_c.x
        self.y = start_c.y
        self.dx = dx
        self.dy = dy
        self.x1 = end_c.x
        self.diff = dy - dx
        self.octant = octant

        logger.debug("walk %s -> %s using octant %d (dx=%d, dy=%d)", start, end, octant.tag, dx, dy)

    def advance(self) -> Point:
        """Return the next point without checking whether ``end`` was passed.

        Past the end the walker keeps extrapolating along the same line.
        """
        p = Point(self.x, self.y)

        if self.diff >= 0:
            self.y += 1
            self.diff -= self.dx

        self.diff += self.dy

        self.x += 1

        return self.octant.from_canonical(p)

    @property
    def remaining(self) -> int:
        """Number of points iteration will still produce."""
        return max(self.x1 - self.x, 0)

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        if self.x >= self.x1:
            raise StopIteration
        return self.advance()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x}, y={self.y}, x1={self.x1}, "
            f"diff={self.diff}, octant={self.octant.tag})"
        )


class BresenhamInclusive:
    """Walk from ``start`` to ``end`` with both endpoints included.

    ``start == end`` yields the single shared point.
    """

    __slots__ = ("_walk",)

    def __init__(self, start, end) -> None:
        self._walk = Bresenham(start, end)

    @property
    def octant(self) -> Octant:
        return self._walk.octant

    def advance(self) -> Point:
        """Return the next point without checking whether ``end`` was passed."""
        return self._walk.advance()

    @property
    def remaining(self) -> int:
        """Number of points iteration will still produce."""
        return max(self._walk.x1 - self._walk.x + 1, 0)

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        if self._walk.x > self._walk.x1:
            raise StopIteration
        return self._walk.advance()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._walk!r})"
