"""
Pacing driver for the growth simulation.

Owns one field and its simulation, runs at most one tick per
``1 / speed`` seconds of caller-supplied time, and forwards controller
changes (speed, drift, tolerance, play/pause, reset, resize). Time is
passed in by the caller, so the driver never reads a clock itself.
"""

from dataclasses import replace
from typing import Optional
import logging

from hrg_policies import RootGrowthPolicy, FieldSamplingPolicy
from .core.snapshot import SimulationSnapshot
from .ops.growth import RootGrowthSimulation
from .sampling.field import generate_field

logger = logging.getLogger(__name__)

MIN_SPEED = 1.0  # ticks per second


class GrowthDriver:
    """
    Controller-side wrapper that paces ``tick`` calls.

    Runtime settings changed through ``set_tolerance`` and
    ``set_drift_rate`` survive ``reset`` and ``resize``.
    """

    def __init__(
        self,
        width: float,
        height: float,
        growth_policy: Optional[RootGrowthPolicy] = None,
        sampling_policy: Optional[FieldSamplingPolicy] = None,
        speed: float = 10.0,
        seed: Optional[int] = None,
    ):
        self.width = width
        self.height = height
        self.growth_policy = growth_policy or RootGrowthPolicy()
        self.sampling_policy = sampling_policy or FieldSamplingPolicy()
        self.seed = seed
        self.speed = MIN_SPEED
        self.set_speed(speed)

        self.playing = True
        self.stagnant_ticks = 0
        self.resets = 0
        self._last_tick: Optional[float] = None
        self.simulation = self._build()

    def _build(self) -> RootGrowthSimulation:
        # Reset n samples with seed + n and grows with seed + n + 1
        seed = None if self.seed is None else self.seed + self.resets
        items, _ = generate_field(self.width, self.height, self.sampling_policy, seed=seed)
        return RootGrowthSimulation(
            items,
            self.width,
            self.height,
            policy=self.growth_policy,
            seed=None if seed is None else seed + 1,
        )

    @property
    def interval(self) -> float:
        """Minimum seconds between ticks."""
        return 1.0 / self.speed

    def set_speed(self, speed: float) -> None:
        if speed < MIN_SPEED:
            logger.warning(f"Speed {speed} below minimum, using {MIN_SPEED} ticks/s")
            speed = MIN_SPEED
        self.speed = float(speed)

    def set_tolerance(self, tolerance: float) -> None:
        self.growth_policy = replace(self.growth_policy, tolerance=tolerance)
        self.simulation.update_config(tolerance=tolerance)

    def set_drift_rate(self, drift_rate: float) -> None:
        self.growth_policy = replace(self.growth_policy, drift_rate=drift_rate)
        self.simulation.update_config(drift_rate=drift_rate)

    def set_playing(self, playing: bool) -> None:
        """Pause or resume; pausing also covers hidden or reduced-motion surfaces."""
        self.playing = bool(playing)
        if self.playing:
            # Do not burst ticks for time spent paused
            self._last_tick = None

    def toggle(self) -> bool:
        self.set_playing(not self.playing)
        return self.playing

    def reset(self) -> None:
        """Discard the simulation and grow a new one on a fresh field."""
        self.resets += 1
        self.simulation = self._build()
        self.stagnant_ticks = 0
        self._last_tick = None
        self.playing = True
        logger.info(f"Simulation reset ({self.resets}) at {self.width}x{self.height}")

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.reset()

    def advance(self, now: float) -> bool:
        """
        Run one tick if playing and at least ``interval`` seconds have passed
        since the previous tick.

        Parameters
        ----------
        now : float
            Current time in seconds (any monotonic origin)

        Returns
        -------
        bool
            True if a tick ran
        """
        if not self.playing:
            return False
        if self._last_tick is not None and now - self._last_tick < self.interval:
            return False

        self._last_tick = now
        if self.simulation.tick():
            self.stagnant_ticks = 0
        else:
            self.stagnant_ticks += 1
        return True

    def snapshot(self) -> SimulationSnapshot:
        return self.simulation.get_state()
