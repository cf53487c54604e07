"""
Hue-chasing root growth over a sampled item field.

This module implements a discrete-time growth simulation that extends root
tips through the item field by:
- Drifting a target hue a bounded random amount every tick
- Letting each active tip claim the most downward reachable item whose hue
  is within tolerance of the target
- Keeping a bounded frontier of active tips, newest growth first

All behavior is controlled via RootGrowthPolicy. Behavior is reproducible
when the random source is seeded.
"""

from typing import List, Optional, Sequence, Tuple, Dict, Any
import math
import logging
import numpy as np

from hrg_policies import RootGrowthPolicy, GROWTH_ALIASES, alias_fields, coerce_float
from ..core.item import FieldItem, ROOT_PARENT
from ..core.snapshot import SimulationSnapshot
from ..spatial.grid_index import SpatialHash
from ..utils.hue import wrap_hue, hue_distance

logger = logging.getLogger(__name__)

# Fields that may change between ticks.
RUNTIME_FIELDS = ("tolerance", "drift_rate")


class RootGrowthSimulation:
    """
    Growth state for one field: items, their spatial hash, the active tips
    and the drifting target hue.

    Items move one way, unconsumed -> consumed. Every consumed item points at
    a parent that was consumed before it (or at ROOT_PARENT), so the consumed
    items always form a forest rooted at the seeded tips.

    Not thread-safe: ``tick`` and ``update_config`` must be called from a
    single thread, one at a time.
    """

    def __init__(
        self,
        items: Sequence[FieldItem],
        width: float,
        height: float,
        policy: Optional[RootGrowthPolicy] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        """
        Build the spatial hash and seed root tips below the trunk.

        Parameters
        ----------
        items : Sequence[FieldItem]
            Item store; ``items[i].id`` must equal ``i``
        width, height : float
            Domain size (pixels)
        policy : RootGrowthPolicy, optional
            Growth parameters
        rng : np.random.Generator, optional
            Random source for the start hue and drift
        seed : int, optional
            Seed for a new generator when ``rng`` is not given

        Raises
        ------
        ValueError
            If the policy is invalid or item ids do not match positions
        """
        if policy is None:
            policy = RootGrowthPolicy()
        errors = policy.validate()
        if errors:
            raise ValueError(f"Invalid RootGrowthPolicy: {errors}")
        if width < 0 or height < 0:
            raise ValueError(f"Domain size must be >= 0, got {width}x{height}")

        self._items: List[FieldItem] = list(items)
        for i, item in enumerate(self._items):
            if item.id != i:
                raise ValueError(f"Item at position {i} has id {item.id}")

        self.width = width
        self.height = height
        self.policy = policy
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.tolerance = policy.tolerance
        self.drift_rate = policy.drift_rate
        self.reach_distance = policy.reach_distance
        self.max_active_tips = policy.max_active_tips

        if policy.start_hue is not None:
            self._target_hue = wrap_hue(policy.start_hue)
        else:
            self._target_hue = float(self.rng.uniform(0.0, 360.0))

        self._active_tips: List[int] = []
        self._tick_count = 0
        self._consumed_count = sum(1 for item in self._items if item.consumed)

        self._index = SpatialHash(self._items, self.reach_distance, width, height)
        for item in self._items:
            self._index.insert(item)

        self._seed_roots()

    def _seed_roots(self) -> None:
        """Claim up to ``max_root_tips`` items just below the trunk as roots."""
        p = self.policy
        trunk_left = (self.width - p.trunk_width) / 2.0
        trunk_right = trunk_left + p.trunk_width
        trunk_bottom = p.trunk_height

        candidates = self._index.query(
            self.width / 2.0,
            trunk_bottom + p.trunk_probe_offset,
            p.trunk_width,
        )

        below = [
            item for item in candidates
            if not item.consumed
            and item.y > trunk_bottom
            and trunk_left - p.trunk_padding < item.x < trunk_right + p.trunk_padding
        ]
        below.sort(key=lambda item: item.y)

        for item in below[:p.max_root_tips]:
            self._consume(item, ROOT_PARENT)
            self._active_tips.append(item.id)

        if self._active_tips:
            logger.info(
                f"Seeded {len(self._active_tips)} root tips below trunk "
                f"[{trunk_left:.1f}, {trunk_right:.1f}] x {trunk_bottom:.1f}"
            )
        else:
            logger.warning(
                f"No items found below trunk in {self.width}x{self.height} field "
                f"of {len(self._items)} items; simulation will not grow"
            )

    def _consume(self, item: FieldItem, parent: int) -> None:
        item.consume(parent)
        self._consumed_count += 1

    @property
    def items(self) -> Tuple[FieldItem, ...]:
        return tuple(self._items)

    @property
    def index(self) -> SpatialHash:
        return self._index

    @property
    def active_tips(self) -> Tuple[int, ...]:
        """Active tip ids, most recent growth first."""
        return tuple(self._active_tips)

    @property
    def target_hue(self) -> float:
        return self._target_hue

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def consumed_count(self) -> int:
        return self._consumed_count

    def _drift_target_hue(self) -> None:
        delta = self.rng.uniform(-1.0, 1.0) * self.drift_rate
        self._target_hue = wrap_hue(self._target_hue + float(delta))

    def _best_candidate(self, tip: FieldItem) -> Optional[FieldItem]:
        """
        Pick the most downward unconsumed item a tip can reach and whose hue
        matches the target. Ties keep the first candidate in query order.
        """
        best_score = -math.inf
        best = None

        nearby = self._index.query(tip.x, tip.y, tip.radius + self.reach_distance)
        for candidate in nearby:
            if candidate.consumed or candidate.id == tip.id:
                continue

            dx = candidate.x - tip.x
            dy = candidate.y - tip.y
            center_dist = math.sqrt(dx * dx + dy * dy)
            edge_dist = center_dist - tip.radius - candidate.radius
            if edge_dist > self.reach_distance:
                continue
            if hue_distance(candidate.hue, self._target_hue) > self.tolerance:
                continue

            # sin of the tip -> candidate angle: +1 straight down, -1 straight up
            score = math.sin(math.atan2(dy, dx))
            if score > best_score:
                best_score = score
                best = candidate

        return best

    def tick(self) -> bool:
        """
        Advance the simulation by one step.

        Algorithm
        ---------
        1. Drift the target hue by U[-drift_rate, drift_rate], wrapped
        2. For each active tip, in order, claim its best candidate
        3. Active tips become new tips + previous tips, truncated to
           ``max_active_tips``. Older tips past the cap are dropped even if
           they could still grow.

        Returns
        -------
        bool
            True if any item was consumed this tick
        """
        self._tick_count += 1
        self._drift_target_hue()

        new_tips: List[int] = []
        for tip_id in self._active_tips:
            tip = self._items[tip_id]
            best = self._best_candidate(tip)
            if best is not None:
                self._consume(best, tip_id)
                new_tips.append(best.id)

        self._active_tips = (new_tips + self._active_tips)[:self.max_active_tips]

        logger.debug(
            f"Tick {self._tick_count}: target_hue={self._target_hue:.1f}, "
            f"grew={len(new_tips)}, active={len(self._active_tips)}"
        )

        return bool(new_tips)

    def get_state(self) -> SimulationSnapshot:
        """Read-only snapshot for renderers."""
        return SimulationSnapshot(
            items=tuple(self._items),
            target_hue=self._target_hue,
            width=self.width,
            height=self.height,
            tick_count=self._tick_count,
            active_tips=tuple(self._active_tips),
        )

    def update_config(self, config: Optional[Dict[str, Any]] = None, **kwargs) -> List[str]:
        """
        Apply runtime configuration changes.

        Only ``tolerance`` and ``drift_rate`` (alias ``driftRate``) are
        recognized; absent or None keys are left unchanged and unknown keys
        are ignored. Values are applied as given, without clamping; numeric
        strings are converted and other values keep the current setting.
        Changes take effect on the next ``tick``.

        Parameters
        ----------
        config : dict, optional
            Partial configuration record
        **kwargs
            Same keys as ``config``; override it

        Returns
        -------
        List[str]
            Names of the fields that were applied
        """
        updates = dict(config or {})
        updates.update(kwargs)
        updates = alias_fields(updates, GROWTH_ALIASES)

        applied = []
        for name, value in updates.items():
            if name not in RUNTIME_FIELDS:
                logger.debug(f"Ignoring unrecognized config field '{name}'")
                continue
            if value is None:
                continue
            new_value = coerce_float(value, default=math.nan)
            if math.isnan(new_value):
                logger.warning(f"Non-numeric value {value!r} for '{name}', keeping {getattr(self, name)}")
                continue
            setattr(self, name, new_value)
            applied.append(name)

        return applied
