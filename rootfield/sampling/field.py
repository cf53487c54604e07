"""
Field construction: sampled points plus size and color attributes.

The engine only reads position, radius and hue. Saturation and brightness
are carried for the renderer.
"""

from typing import Optional, Tuple, List
import logging
import numpy as np

from hrg_policies import FieldSamplingPolicy, OperationReport
from ..core.types import Point2D
from ..core.item import FieldItem
from ..utils.hue import wrap_hue
from .poisson_disk import poisson_disk_sample

logger = logging.getLogger(__name__)


def build_items(
    points: List[Point2D],
    policy: Optional[FieldSamplingPolicy] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[FieldItem]:
    """
    Attach radius and color to points, producing the item store.
    
    Item ids equal list positions. Attributes are drawn per point in the
    order radius, hue, saturation, brightness.
    
    Parameters
    ----------
    points : List[Point2D]
        Sampled positions
    policy : FieldSamplingPolicy, optional
        Attribute bands
    rng : np.random.Generator, optional
        Random source
    
    Returns
    -------
    List[FieldItem]
        Unconsumed items
    """
    if policy is None:
        policy = FieldSamplingPolicy()
    if rng is None:
        rng = np.random.default_rng()
    
    items = []
    for i, p in enumerate(points):
        radius = rng.uniform(policy.radius_min, policy.radius_max)
        if policy.hue_center is None:
            hue = rng.uniform(0.0, 360.0)
        else:
            hue = wrap_hue(policy.hue_center + rng.uniform(-policy.hue_spread, policy.hue_spread))
        saturation = rng.uniform(policy.saturation_min, policy.saturation_max)
        brightness = rng.uniform(policy.brightness_min, policy.brightness_max)
        items.append(FieldItem(
            id=i,
            x=p.x,
            y=p.y,
            radius=float(radius),
            hue=float(hue),
            saturation=float(saturation),
            brightness=float(brightness),
        ))
    
    return items


def generate_field(
    width: float,
    height: float,
    policy: Optional[FieldSamplingPolicy] = None,
    seed: Optional[int] = None,
) -> Tuple[List[FieldItem], OperationReport]:
    """
    Sample a point field and build its items.
    
    Parameters
    ----------
    width, height : float
        Domain size (pixels)
    policy : FieldSamplingPolicy, optional
        Sampling and attribute policy
    seed : int, optional
        Random seed; overrides ``policy.seed``. The same generator drives
        sampling and attribute draws, so a fixed seed fixes the whole field.
        
    Returns
    -------
    items : List[FieldItem]
        Item store
    report : OperationReport
        Report with field statistics
    """
    if policy is None:
        policy = FieldSamplingPolicy()
    
    report = OperationReport(
        operation="generate_field",
        success=True,
        requested_policy=policy.to_dict(),
        effective_policy=policy.to_dict(),
    )
    
    if not policy.enabled:
        report.metadata = {"n_items": 0, "reason": "sampling disabled"}
        return [], report
    
    errors = policy.validate()
    if errors:
        raise ValueError(f"Invalid FieldSamplingPolicy: {errors}")
    
    if seed is None:
        seed = policy.seed
    rng = np.random.default_rng(seed)
    
    points = poisson_disk_sample(width, height, policy.min_dist, k=policy.k, rng=rng)
    items = build_items(points, policy, rng)
    
    report.effective_policy["seed"] = seed
    if items:
        hues = np.array([item.hue for item in items])
        radii = np.array([item.radius for item in items])
        report.metadata = {
            "n_items": len(items),
            "width": width,
            "height": height,
            "mean_radius": float(radii.mean()),
            "hue_min": float(hues.min()),
            "hue_max": float(hues.max()),
        }
    else:
        report.metadata = {"n_items": 0, "width": width, "height": height}
        report.add_warning(f"Field is empty for {width}x{height} domain")
    
    logger.info(f"Generated field of {len(items)} items over {width}x{height}")
    
    return items, report
