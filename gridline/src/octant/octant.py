"""Reduce any line direction to the canonical shallow, rightward octant.

A line from ``start`` to ``end`` falls into one of eight symmetric direction
classes. Each class owns a fixed reflection/swap of the coordinate axes that
maps the line into octant ``0``, where it advances along ``+x`` with a slope in
``[0, 1]``. The walker steps in that canonical space and maps every produced
point back with the inverse transform of the same octant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from gridline.src.core.errors import InvalidOctantError
from gridline.src.core.point import Point, as_point

__all__ = ["Octant"]

_Transform = Callable[[int, int], Tuple[int, int]]

# indexed by octant tag
_TO_CANONICAL: Tuple[_Transform, ...] = (
    lambda x, y: (x, y),
    lambda x, y: (y, x),
    lambda x, y: (y, -x),
    lambda x, y: (-x, y),
    lambda x, y: (-x, -y),
    lambda x, y: (-y, -x),
    lambda x, y: (-y, x),
    lambda x, y: (x, -y),
)

_FROM_CANONICAL: Tuple[_Transform, ...] = (
    lambda x, y: (x, y),
    lambda x, y: (y, x),
    lambda x, y: (-y, x),
    lambda x, y: (-x, y),
    lambda x, y: (-x, -y),
    lambda x, y: (-y, -x),
    lambda x, y: (y, -x),
    lambda x, y: (x, -y),
)


@dataclass(frozen=True)
class Octant:
    """One of the eight direction classes of a 2D segment.

    Attributes
    ----------
    tag:
        Integer in ``0``-``7``: ``+4`` when the line points downward, ``+2``
        when it still points left after that reflection and ``+1`` when the
        reduced line is steeper than the diagonal.
    """

    tag: int

    def __post_init__(self) -> None:
        if isinstance(self.tag, bool) or not isinstance(self.tag, int) or not 0 <= self.tag <= 7:
            raise InvalidOctantError(f"octant tag must be an integer in 0..7, got {self.tag!r}")

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Octant":
        """Classify the segment ``start`` -> ``end``."""
        start = as_point(start)
        end = as_point(end)
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        tag = 0

        if dy < 0:
            dx, dy = -dx, -dy
            tag += 4

        if dx < 0:
            dx, dy = dy, -dx
            tag += 2

        # ties stay shallow so x remains the sweep axis
        if dx < dy:
            tag += 1

        return cls(tag)

    def to_canonical(self, point: Point) -> Point:
        """Map ``point`` from original space into octant ``0``."""
        return Point(*_TO_CANONICAL[self.tag](point[0], point[1]))

    def from_canonical(self, point: Point) -> Point:
        """Map ``point`` from octant ``0`` back to original space."""
        return Point(*_FROM_CANONICAL[self.tag](point[0], point[1]))

    @property
    def is_steep(self) -> bool:
        """``True`` when the original line sweeps along the y axis."""
        return self.tag in (1, 2, 5, 6)

    def __int__(self) -> int:
        return self.tag

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Octant({self.tag})"
