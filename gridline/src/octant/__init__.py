"""Octant classification and canonical coordinate transforms."""

from .octant import Octant

__all__ = ["Octant"]
