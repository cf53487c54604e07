"""
Read-only simulation snapshot handed to renderers.
"""

from dataclasses import dataclass
from typing import Tuple, Dict, Any

from .item import FieldItem


@dataclass(frozen=True)
class SimulationSnapshot:
    """
    State of a simulation after a tick.
    
    ``items`` holds the live item objects, not copies; consumers must treat
    them as read-only.
    """
    
    items: Tuple[FieldItem, ...]
    target_hue: float
    width: float
    height: float
    tick_count: int
    active_tips: Tuple[int, ...]
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "target_hue": self.target_hue,
            "width": self.width,
            "height": self.height,
            "tick_count": self.tick_count,
            "active_tips": list(self.active_tips),
        }
