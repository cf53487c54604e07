"""
Root Growth Policy for HRG.

This module contains the RootGrowthPolicy dataclass that controls the
hue-chasing growth simulation.

DESIGN GOALS
------------
A) Bounded frontier: at most ``max_active_tips`` tips grow per tick, so the
   per-tick cost does not depend on field density.
B) Directed growth: tips prefer the most downward reachable item whose hue
   is within ``tolerance`` of the drifting target.

All geometric values are in PIXELS; hues and tolerances in degrees.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any, List

from .base import policy_from_dict

# Controller keys that arrive in camelCase.
GROWTH_ALIASES = {
    "driftRate": "drift_rate",
    "reachDistance": "reach_distance",
    "maxActiveTips": "max_active_tips",
    "startHue": "start_hue",
}


@dataclass
class RootGrowthPolicy:
    """
    Policy for the growth engine.

    JSON Schema:
    {
        "tolerance": float (deg),
        "drift_rate": float (deg per tick),
        "reach_distance": float (px, edge to edge),
        "max_active_tips": int,
        "start_hue": float (deg) | null,

        # Trunk the roots hang from
        "trunk_width": float (px),
        "trunk_height": float (px),
        "trunk_padding": float (px),
        "trunk_probe_offset": float (px),
        "max_root_tips": int
    }
    """
    tolerance: float = 30.0
    drift_rate: float = 2.0
    reach_distance: float = 50.0
    max_active_tips: int = 10
    start_hue: Optional[float] = None  # None = random

    # Trunk geometry used for seeding
    trunk_width: float = 80.0
    trunk_height: float = 60.0
    trunk_padding: float = 20.0
    trunk_probe_offset: float = 30.0
    max_root_tips: int = 4

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "RootGrowthPolicy":
        """Create from dictionary."""
        return policy_from_dict(RootGrowthPolicy, d, aliases=GROWTH_ALIASES)

    def validate(self) -> List[str]:
        """
        Validate policy parameters.
        
        Returns
        -------
        List[str]
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.tolerance < 0:
            errors.append(f"tolerance must be >= 0, got {self.tolerance}")

        if self.drift_rate < 0:
            errors.append(f"drift_rate must be >= 0, got {self.drift_rate}")

        if self.reach_distance <= 0:
            errors.append(f"reach_distance must be > 0, got {self.reach_distance}")

        if self.max_active_tips < 0:
            errors.append(f"max_active_tips must be >= 0, got {self.max_active_tips}")

        if self.trunk_width < 0 or self.trunk_height < 0:
            errors.append(
                f"trunk dimensions must be >= 0, got "
                f"{self.trunk_width}x{self.trunk_height}"
            )

        if self.max_root_tips < 0:
            errors.append(f"max_root_tips must be >= 0, got {self.max_root_tips}")

        return errors


__all__ = ["RootGrowthPolicy", "GROWTH_ALIASES"]
