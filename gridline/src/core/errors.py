"""Exception types raised by the line walking package."""

from __future__ import annotations


class GridlineError(ValueError):
    """Base class for all input errors raised by ``gridline``."""


class InvalidPointError(GridlineError):
    """Raised when a coordinate pair is not made of two integers."""


class InvalidOctantError(GridlineError):
    """Raised when an octant tag falls outside ``0``-``7``."""


class ConfigError(GridlineError):
    """Raised for unsupported or malformed configuration."""


__all__ = [
    "GridlineError",
    "InvalidPointError",
    "InvalidOctantError",
    "ConfigError",
]
