"""
Field Sampling Policy for HRG.

Controls the Poisson disk point field and the per-item attribute bands
attached to it before growth starts.

UNIT CONVENTIONS
----------------
Distances and radii are in PIXELS. Hues are in degrees, saturation and
brightness in percent.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any, List

from .base import policy_from_dict


@dataclass
class FieldSamplingPolicy:
    """
    Policy for the sampled item field.

    JSON Schema:
    {
        "enabled": bool,
        "seed": int | null,
        "min_dist": float (px),
        "k": int,
        "radius_min": float (px),
        "radius_max": float (px),
        "hue_center": float (deg) | null,
        "hue_spread": float (deg),
        "saturation_min": float (%),
        "saturation_max": float (%),
        "brightness_min": float (%),
        "brightness_max": float (%)
    }

    With ``hue_center`` unset, hues are uniform over the whole wheel.
    """
    enabled: bool = True
    seed: Optional[int] = None

    # Poisson disk sampling
    min_dist: float = 35.0
    k: int = 30

    # Item attributes
    radius_min: float = 5.0
    radius_max: float = 25.0
    hue_center: Optional[float] = None
    hue_spread: float = 180.0  # +/- offset around hue_center
    saturation_min: float = 60.0
    saturation_max: float = 100.0
    brightness_min: float = 50.0
    brightness_max: float = 90.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "FieldSamplingPolicy":
        """Create from dictionary."""
        return policy_from_dict(FieldSamplingPolicy, d, aliases={"minDist": "min_dist"})

    def validate(self) -> List[str]:
        """
        Validate policy parameters.
        
        Returns
        -------
        List[str]
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.min_dist <= 0:
            errors.append(f"min_dist must be > 0, got {self.min_dist}")

        if self.k < 0:
            errors.append(f"k must be >= 0, got {self.k}")

        if self.radius_min <= 0:
            errors.append(f"radius_min must be > 0, got {self.radius_min}")

        if self.radius_max < self.radius_min:
            errors.append(
                f"radius_max ({self.radius_max}) must be >= radius_min ({self.radius_min})"
            )

        if not 0.0 <= self.hue_spread <= 180.0:
            errors.append(f"hue_spread must be in [0, 180], got {self.hue_spread}")

        if self.saturation_max < self.saturation_min:
            errors.append(
                f"saturation_max ({self.saturation_max}) must be >= "
                f"saturation_min ({self.saturation_min})"
            )

        if self.brightness_max < self.brightness_min:
            errors.append(
                f"brightness_max ({self.brightness_max}) must be >= "
                f"brightness_min ({self.brightness_min})"
            )

        return errors


__all__ = ["FieldSamplingPolicy"]
