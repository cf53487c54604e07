"""
Geometric value types.
"""

from dataclasses import dataclass
import math
import numpy as np


@dataclass(frozen=True)
class Point2D:
    """Immutable 2D point in the sampling domain (pixels)."""
    
    x: float
    y: float
    
    def to_array(self) -> np.ndarray:
        """Convert to a numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)
    
    def distance_to(self, other: "Point2D") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)
    
    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}
    
    @classmethod
    def from_dict(cls, d: dict) -> "Point2D":
        return cls(x=float(d["x"]), y=float(d["y"]))
