"""
Field items: sampled points carrying size, color and consumption state.
"""

from dataclasses import dataclass, field
from typing import Optional

# Parent of a seeded root. Unconsumed items have parent None.
ROOT_PARENT = -1


@dataclass
class FieldItem:
    """
    One element of the point field.
    
    ``id`` is the item's index in the owning item store and is used directly
    as a cross-reference by ``parent`` and by the spatial index. Position,
    radius and color never change after creation; ``consumed`` and
    ``parent`` are written once, by ``consume``.
    """
    
    id: int
    x: float
    y: float
    radius: float
    hue: float
    saturation: float = 80.0
    brightness: float = 70.0
    consumed: bool = field(default=False)
    parent: Optional[int] = field(default=None)
    
    @property
    def is_root(self) -> bool:
        return self.consumed and self.parent == ROOT_PARENT
    
    def consume(self, parent: int) -> None:
        """
        Claim this item for the growing structure.
        
        Parameters
        ----------
        parent : int
            Id of an already consumed item, or ROOT_PARENT for a seeded root
        
        Raises
        ------
        ValueError
            If the item was already consumed
        """
        if self.consumed:
            raise ValueError(f"Item {self.id} already consumed (parent {self.parent})")
        if parent == self.id:
            raise ValueError(f"Item {self.id} cannot be its own parent")
        self.consumed = True
        self.parent = parent
    
    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "radius": self.radius,
            "hue": self.hue,
            "saturation": self.saturation,
            "brightness": self.brightness,
            "consumed": self.consumed,
            "parent": self.parent,
        }
