"""Core data structures for the root field."""

from .types import Point2D
from .item import FieldItem, ROOT_PARENT
from .snapshot import SimulationSnapshot

__all__ = [
    "Point2D",
    "FieldItem",
    "ROOT_PARENT",
    "SimulationSnapshot",
]
