"""
Poisson disk sampling of the point field.

Bridson's dart-throwing algorithm with an acceleration grid: every accepted
point is at least ``min_dist`` from every other, and sampling continues
until no active point can place a new neighbor.

UNIT CONVENTIONS
----------------
All distances are in PIXELS.
"""

from typing import Optional, Tuple, List
import math
import logging
import numpy as np

from hrg_policies import FieldSamplingPolicy, OperationReport
from ..core.types import Point2D

logger = logging.getLogger(__name__)

# With cell size min_dist / sqrt(2), a conflicting point can be at most two
# cells away along either axis.
NEIGHBOR_SEARCH_CELLS = 2


def poisson_disk_sample(
    width: float,
    height: float,
    min_dist: float,
    k: int = 30,
    rng: Optional[np.random.Generator] = None,
) -> List[Point2D]:
    """
    Sample a minimum-spacing point set over [0, width) x [0, height).
    
    Parameters
    ----------
    width, height : float
        Domain size. A non-positive size yields no points.
    min_dist : float
        Minimum distance between any two points
    k : int
        Candidate attempts per active point before it is retired
    rng : np.random.Generator, optional
        Random source; a fresh unseeded generator if None
    
    Returns
    -------
    List[Point2D]
        Points in insertion order; the first is the random seed point
    
    Raises
    ------
    ValueError
        If min_dist is not positive
    """
    if min_dist <= 0:
        raise ValueError(f"min_dist must be > 0, got {min_dist}")
    if width <= 0 or height <= 0:
        logger.warning(f"Empty sampling domain {width}x{height}, returning no points")
        return []
    
    if rng is None:
        rng = np.random.default_rng()
    
    cell_size = min_dist / math.sqrt(2.0)
    grid_w = int(math.ceil(width / cell_size))
    grid_h = int(math.ceil(height / cell_size))
    grid = np.full((grid_h, grid_w), -1, dtype=np.int64)
    min_dist_sq = min_dist * min_dist
    
    xs: List[float] = []
    ys: List[float] = []
    active: List[int] = []
    
    def add_point(x: float, y: float) -> None:
        idx = len(xs)
        xs.append(x)
        ys.append(y)
        active.append(idx)
        grid[int(y / cell_size), int(x / cell_size)] = idx
    
    def is_valid(x: float, y: float) -> bool:
        if x < 0 or x >= width or y < 0 or y >= height:
            return False
        col = int(x / cell_size)
        row = int(y / cell_size)
        r0 = max(row - NEIGHBOR_SEARCH_CELLS, 0)
        r1 = min(row + NEIGHBOR_SEARCH_CELLS, grid_h - 1)
        c0 = max(col - NEIGHBOR_SEARCH_CELLS, 0)
        c1 = min(col + NEIGHBOR_SEARCH_CELLS, grid_w - 1)
        for r in range(r0, r1 + 1):
            for c in range(c0, c1 + 1):
                idx = grid[r, c]
                if idx < 0:
                    continue
                dx = xs[idx] - x
                dy = ys[idx] - y
                if dx * dx + dy * dy < min_dist_sq:
                    return False
        return True
    
    add_point(rng.uniform(0.0, width), rng.uniform(0.0, height))
    
    while active:
        slot = int(rng.integers(len(active)))
        parent = active[slot]
        px, py = xs[parent], ys[parent]
        
        found = False
        for _ in range(k):
            angle = rng.uniform(0.0, 2.0 * math.pi)
            dist = min_dist + rng.uniform(0.0, min_dist)
            nx = px + math.cos(angle) * dist
            ny = py + math.sin(angle) * dist
            if is_valid(nx, ny):
                add_point(nx, ny)
                found = True
                break
        
        if not found:
            # Swap-remove: active order carries no meaning
            active[slot] = active[-1]
            active.pop()
    
    logger.debug(
        f"Poisson disk sampling: {len(xs)} points in {width}x{height} "
        f"(min_dist={min_dist}, k={k}, grid={grid_w}x{grid_h})"
    )
    
    return [Point2D(x, y) for x, y in zip(xs, ys)]


def sample_field_points(
    width: float,
    height: float,
    policy: Optional[FieldSamplingPolicy] = None,
    seed: Optional[int] = None,
) -> Tuple[List[Point2D], OperationReport]:
    """
    Sample the point field according to a policy.
    
    Parameters
    ----------
    width, height : float
        Domain size (pixels)
    policy : FieldSamplingPolicy, optional
        Policy controlling spacing and candidate budget
    seed : int, optional
        Random seed; overrides ``policy.seed``
        
    Returns
    -------
    points : List[Point2D]
        Sampled points
    report : OperationReport
        Report with sampling statistics and metadata
    """
    if policy is None:
        policy = FieldSamplingPolicy()
    
    if not policy.enabled:
        return [], OperationReport(
            operation="sample_field_points",
            success=True,
            requested_policy=policy.to_dict(),
            effective_policy=policy.to_dict(),
            metadata={"n_points": 0, "reason": "sampling disabled"},
        )
    
    errors = policy.validate()
    if errors:
        raise ValueError(f"Invalid FieldSamplingPolicy: {errors}")
    
    if seed is None:
        seed = policy.seed
    rng = np.random.default_rng(seed)
    
    points = poisson_disk_sample(width, height, policy.min_dist, k=policy.k, rng=rng)
    
    cell_size = policy.min_dist / math.sqrt(2.0)
    report = OperationReport(
        operation="sample_field_points",
        success=True,
        requested_policy=policy.to_dict(),
        effective_policy={**policy.to_dict(), "seed": seed},
        metadata={
            "n_points": len(points),
            "width": width,
            "height": height,
            "min_dist": policy.min_dist,
            "k": policy.k,
            "grid_shape": [
                int(math.ceil(max(height, 0) / cell_size)),
                int(math.ceil(max(width, 0) / cell_size)),
            ],
        },
    )
    if not points:
        report.add_warning(f"No points sampled in {width}x{height} domain")
    
    return points, report
