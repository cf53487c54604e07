"""Point field sampling and item construction."""

from .poisson_disk import poisson_disk_sample, sample_field_points
from .field import build_items, generate_field

__all__ = [
    "poisson_disk_sample",
    "sample_field_points",
    "build_items",
    "generate_field",
]
