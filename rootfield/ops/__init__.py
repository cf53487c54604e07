"""Growth operations on the item field."""

from .growth import RootGrowthSimulation, RUNTIME_FIELDS

__all__ = ["RootGrowthSimulation", "RUNTIME_FIELDS"]
