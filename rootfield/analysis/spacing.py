"""
Spacing and coverage checks for sampled point sets.

UNIT CONVENTIONS
----------------
All distances are in PIXELS.
"""

from typing import Optional, Sequence, Tuple
import numpy as np
from scipy.spatial import cKDTree

from ..core.types import Point2D


def _as_array(points: Sequence[Point2D]) -> np.ndarray:
    if len(points) == 0:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([[p.x, p.y] for p in points], dtype=np.float64)


def min_pairwise_distance(points: Sequence[Point2D]) -> float:
    """
    Smallest distance between any two points (inf for fewer than two).
    """
    coords = _as_array(points)
    if len(coords) < 2:
        return float("inf")
    tree = cKDTree(coords)
    dists, _ = tree.query(coords, k=2)
    return float(dists[:, 1].min())


def find_coverage_gap(
    points: Sequence[Point2D],
    width: float,
    height: float,
    min_dist: float,
    n_probes: int = 10000,
    rng: Optional[np.random.Generator] = None,
) -> Optional[Tuple[float, float]]:
    """
    Probe the domain for a spot where another point would still fit.
    
    Parameters
    ----------
    points : Sequence[Point2D]
        Sampled points
    width, height : float
        Domain size
    min_dist : float
        Required spacing
    n_probes : int
        Number of uniform random probe locations
    rng : np.random.Generator, optional
        Random source
    
    Returns
    -------
    (x, y) or None
        A probe inside the domain at least ``min_dist`` from every point, or
        None if every probe was covered
    """
    if rng is None:
        rng = np.random.default_rng()
    
    probes = np.column_stack([
        rng.uniform(0.0, width, n_probes),
        rng.uniform(0.0, height, n_probes),
    ])
    
    coords = _as_array(points)
    if len(coords) == 0:
        return (float(probes[0, 0]), float(probes[0, 1])) if n_probes > 0 else None
    
    tree = cKDTree(coords)
    dists, _ = tree.query(probes, k=1)
    gaps = np.nonzero(dists >= min_dist)[0]
    if len(gaps) == 0:
        return None
    x, y = probes[gaps[0]]
    return (float(x), float(y))


def uncovered_fraction(
    points: Sequence[Point2D],
    width: float,
    height: float,
    min_dist: float,
    n_probes: int = 10000,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """
    Fraction of uniform random probes at least ``min_dist`` from every point.
    
    Approximates the share of the domain where another point would fit.
    """
    if n_probes <= 0:
        return 0.0
    if rng is None:
        rng = np.random.default_rng()
    
    coords = _as_array(points)
    if len(coords) == 0:
        return 1.0
    
    probes = np.column_stack([
        rng.uniform(0.0, width, n_probes),
        rng.uniform(0.0, height, n_probes),
    ])
    dists, _ = cKDTree(coords).query(probes, k=1)
    return float(np.count_nonzero(dists >= min_dist)) / n_probes
