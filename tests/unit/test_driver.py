"""
Unit tests for GrowthDriver pacing and controller forwarding.
"""

import pytest

from hrg_policies import RootGrowthPolicy, FieldSamplingPolicy
from rootfield.driver import GrowthDriver, MIN_SPEED


@pytest.fixture
def driver():
    return GrowthDriver(
        300, 300,
        growth_policy=RootGrowthPolicy(tolerance=60.0),
        sampling_policy=FieldSamplingPolicy(min_dist=20.0),
        speed=10.0,
        seed=5,
    )


class TestPacing:

    def test_first_advance_ticks(self, driver):
        assert driver.advance(0.0) is True
        assert driver.simulation.tick_count == 1

    def test_respects_interval(self, driver):
        driver.advance(0.0)
        assert driver.advance(0.05) is False
        assert driver.advance(0.1) is True
        assert driver.simulation.tick_count == 2

    def test_paused_does_not_tick(self, driver):
        driver.set_playing(False)
        assert driver.advance(0.0) is False
        assert driver.advance(10.0) is False
        assert driver.simulation.tick_count == 0

    def test_resume_does_not_burst(self, driver):
        driver.advance(0.0)
        driver.set_playing(False)
        driver.set_playing(True)
        assert driver.advance(100.0) is True
        assert driver.advance(100.01) is False

    def test_toggle(self, driver):
        assert driver.toggle() is False
        assert driver.toggle() is True

    def test_speed_clamped(self, driver):
        driver.set_speed(0)
        assert driver.speed == MIN_SPEED
        assert driver.interval == pytest.approx(1.0 / MIN_SPEED)

    def test_stagnation_counted(self):
        driver = GrowthDriver(
            300, 300,
            growth_policy=RootGrowthPolicy(tolerance=0.0, drift_rate=0.0),
            sampling_policy=FieldSamplingPolicy(min_dist=20.0),
            seed=1,
        )
        for step in range(5):
            driver.advance(float(step))
        # Exact hue matches on a continuous hue field do not happen
        assert driver.stagnant_ticks == 5


class TestControls:

    def test_set_tolerance_forwards_and_survives_reset(self, driver):
        driver.set_tolerance(12.0)
        assert driver.simulation.tolerance == 12.0
        driver.reset()
        assert driver.simulation.tolerance == 12.0

    def test_set_drift_rate(self, driver):
        driver.set_drift_rate(0.5)
        assert driver.simulation.drift_rate == 0.5
        driver.reset()
        assert driver.simulation.drift_rate == 0.5

    def test_reset_replaces_simulation(self, driver):
        old = driver.simulation
        driver.advance(0.0)
        driver.set_playing(False)
        driver.reset()
        assert driver.simulation is not old
        assert driver.simulation.tick_count == 0
        assert driver.playing is True
        assert driver.stagnant_ticks == 0

    def test_resize(self, driver):
        driver.resize(500, 200)
        state = driver.snapshot()
        assert (state.width, state.height) == (500, 200)
        for item in state.items:
            assert 0 <= item.x < 500
            assert 0 <= item.y < 200

    def test_seeded_driver_reproducible(self):
        a = GrowthDriver(300, 300, sampling_policy=FieldSamplingPolicy(min_dist=25.0), seed=9)
        b = GrowthDriver(300, 300, sampling_policy=FieldSamplingPolicy(min_dist=25.0), seed=9)
        for step in range(20):
            a.advance(float(step))
            b.advance(float(step))
        assert a.snapshot().to_dict() == b.snapshot().to_dict()
