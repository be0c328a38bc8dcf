"""Core value types and errors."""

from .errors import ConfigError, GridlineError, InvalidOctantError, InvalidPointError
from .point import Point, as_point

__all__ = [
    "Point",
    "as_point",
    "GridlineError",
    "InvalidPointError",
    "InvalidOctantError",
    "ConfigError",
]
