"""
Hue Root Growth - Root Field Engine

This package grows a root-like branching structure across a 2D point field
toward a slowly drifting target hue. It includes Poisson disk sampling of the
field, a uniform-grid spatial hash for radius queries, and the discrete-time
growth simulation.

Main Entry Points:
    - generate_field(): Sample points and attach size and color
    - RootGrowthSimulation: Seed roots and advance growth with tick()
    - GrowthDriver: Pace ticks from elapsed time for an interactive host

Example:
    >>> from rootfield import generate_field, RootGrowthSimulation
    >>> from hrg_policies import RootGrowthPolicy
    >>>
    >>> items, report = generate_field(800, 600, seed=7)
    >>> sim = RootGrowthSimulation(items, 800, 600, RootGrowthPolicy(tolerance=40), seed=8)
    >>> while sim.tick():
    ...     state = sim.get_state()
"""

from .core import Point2D, FieldItem, ROOT_PARENT, SimulationSnapshot
from .spatial import SpatialHash
from .sampling import poisson_disk_sample, sample_field_points, build_items, generate_field
from .ops import RootGrowthSimulation
from .driver import GrowthDriver
from .utils import wrap_hue, hue_distance

__all__ = [
    # Core
    "Point2D",
    "FieldItem",
    "ROOT_PARENT",
    "SimulationSnapshot",
    # Operations
    "SpatialHash",
    "poisson_disk_sample",
    "sample_field_points",
    "build_items",
    "generate_field",
    "RootGrowthSimulation",
    "GrowthDriver",
    # Utilities
    "wrap_hue",
    "hue_distance",
]
