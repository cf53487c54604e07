"""Utility helpers."""

from .hue import wrap_hue, hue_distance

__all__ = ["wrap_hue", "hue_distance"]
