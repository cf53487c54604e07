"""
Uniform grid-based spatial hash for fast radius queries over field items.
"""

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple
import math

from ..core.item import FieldItem


class SpatialHash:
    """
    Uniform 2D grid spatial hash over an item store.
    
    Buckets hold item ids only; positions are read back from the shared
    item store, so the hash never keeps a second copy of mutable item state.
    Entries are never removed: item positions are immutable for the life of
    a simulation.
    
    Cells are clamped into the ``cols x rows`` grid covering the domain.
    Items outside the domain land in the nearest border cell, and query boxes
    are clamped the same way, so they are still found.
    """
    
    def __init__(
        self,
        store: Sequence[FieldItem],
        cell_size: float,
        width: float,
        height: float,
    ):
        """
        Initialize spatial hash.
        
        Parameters
        ----------
        store : Sequence[FieldItem]
            Item store indexed by item id
        cell_size : float
            Size of grid cells (pixels)
        width, height : float
            Domain size (pixels)
        """
        if cell_size <= 0:
            raise ValueError(f"cell_size must be > 0, got {cell_size}")
        
        self.store = store
        self.cell_size = float(cell_size)
        self.width = width
        self.height = height
        self.cols = max(1, int(math.ceil(width / self.cell_size)))
        self.rows = max(1, int(math.ceil(height / self.cell_size)))
        
        self.cells: Dict[int, List[int]] = defaultdict(list)
        self._count = 0
    
    def __len__(self) -> int:
        return self._count
    
    def _key(self, col: int, row: int) -> int:
        return row * self.cols + col
    
    def _clamp_col(self, col: int) -> int:
        return min(max(col, 0), self.cols - 1)
    
    def _clamp_row(self, row: int) -> int:
        return min(max(row, 0), self.rows - 1)
    
    def cell_of(self, x: float, y: float) -> Tuple[int, int]:
        """Convert a position to its (col, row) grid cell."""
        return (
            self._clamp_col(int(math.floor(x / self.cell_size))),
            self._clamp_row(int(math.floor(y / self.cell_size))),
        )
    
    def insert(self, item: FieldItem) -> None:
        """
        Insert an item by id. Duplicate positions are all retained.
        
        Parameters
        ----------
        item : FieldItem
            Item whose ``id`` indexes ``store``
        """
        col, row = self.cell_of(item.x, item.y)
        self.cells[self._key(col, row)].append(item.id)
        self._count += 1
    
    def query_ids(self, x: float, y: float, radius: float) -> List[int]:
        """
        Find ids of all items within ``radius`` of (x, y).
        
        Parameters
        ----------
        x, y : float
            Query center
        radius : float
            Search radius; negative radius matches nothing
        
        Returns
        -------
        List[int]
            Ids in cell-scan order (row-major over the query box)
        """
        if radius < 0:
            return []
        
        min_col = self._clamp_col(int(math.floor((x - radius) / self.cell_size)))
        max_col = self._clamp_col(int(math.floor((x + radius) / self.cell_size)))
        min_row = self._clamp_row(int(math.floor((y - radius) / self.cell_size)))
        max_row = self._clamp_row(int(math.floor((y + radius) / self.cell_size)))
        r2 = radius * radius
        
        store = self.store
        results = []
        for row in range(min_row, max_row + 1):
            for col in range(min_col, max_col + 1):
                bucket = self.cells.get(self._key(col, row))
                if not bucket:
                    continue
                for item_id in bucket:
                    item = store[item_id]
                    dx = item.x - x
                    dy = item.y - y
                    if dx * dx + dy * dy <= r2:
                        results.append(item_id)
        
        return results
    
    def query(self, x: float, y: float, radius: float) -> List[FieldItem]:
        """
        Find all items within ``radius`` of (x, y).
        
        Same contract as ``query_ids`` but resolves ids through the store.
        """
        store = self.store
        return [store[item_id] for item_id in self.query_ids(x, y, radius)]
