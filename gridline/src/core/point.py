"""Integer point value type shared by the octant and walker modules."""

from __future__ import annotations

from typing import Any, NamedTuple

import numpy as np

from gridline.src.core.errors import InvalidPointError

__all__ = ["Point", "as_point"]


class Point(NamedTuple):
    """Immutable ``(x, y)`` lattice coordinate."""

    x: int
    y: int

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"({self.x}, {self.y})"


def _is_integer(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def as_point(value: Any) -> Point:
    """Return ``value`` as a :class:`Point`.

    Parameters
    ----------
    value:
        A :class:`Point`, a 2-tuple/list of integers or a 1D ``numpy`` array
        holding two integers.

    Raises
    ------
    InvalidPointError
        If ``value`` is not a pair of integers. Floats are rejected even when
        they hold an integral value.
    """

    if isinstance(value, Point):
        return value
    if isinstance(value, np.ndarray):
        if value.shape != (2,):
            raise InvalidPointError(f"expected an array of shape (2,), got {value.shape}")
        value = value.tolist() if np.issubdtype(value.dtype, np.integer) else tuple(value)
    if isinstance(value, (str, bytes)) or not hasattr(value, "__len__"):
        raise InvalidPointError(f"point must be a pair of integers, got {value!r}")
    if len(value) != 2:
        raise InvalidPointError(f"point must have exactly two coordinates, got {len(value)}")
    x, y = value
    if not (_is_integer(x) and _is_integer(y)):
        raise InvalidPointError(f"point coordinates must be integers, got {value!r}")
    return Point(int(x), int(y))
