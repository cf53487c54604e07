"""Spatial indexing for neighbor queries."""

from .grid_index import SpatialHash

__all__ = ["SpatialHash"]
