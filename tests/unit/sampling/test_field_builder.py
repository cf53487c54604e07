"""
Unit tests for item field construction.
"""

import numpy as np
import pytest

from hrg_policies import FieldSamplingPolicy
from rootfield.core.types import Point2D
from rootfield.sampling.field import build_items, generate_field
from rootfield.utils.hue import hue_distance


class TestBuildItems:
    """Tests for attribute assignment on sampled points."""

    def test_ids_match_positions(self):
        points = [Point2D(1.0, 2.0), Point2D(3.0, 4.0), Point2D(5.0, 6.0)]
        items = build_items(points, rng=np.random.default_rng(0))
        assert [item.id for item in items] == [0, 1, 2]
        assert [(item.x, item.y) for item in items] == [(1.0, 2.0), (3.0, 4.0), (5.0, 6.0)]

    def test_items_start_unconsumed(self):
        items = build_items([Point2D(0.0, 0.0)], rng=np.random.default_rng(0))
        assert items[0].consumed is False
        assert items[0].parent is None

    def test_attribute_bands(self):
        points = [Point2D(float(i), 0.0) for i in range(500)]
        items = build_items(points, FieldSamplingPolicy(), np.random.default_rng(1))
        for item in items:
            assert 5.0 <= item.radius <= 25.0
            assert 0.0 <= item.hue < 360.0
            assert 60.0 <= item.saturation <= 100.0
            assert 50.0 <= item.brightness <= 90.0

    def test_hue_centered_distribution_wraps(self):
        """Hues around a center near 0 should wrap into [0, 360)."""
        policy = FieldSamplingPolicy(hue_center=5.0, hue_spread=20.0)
        points = [Point2D(float(i), 0.0) for i in range(500)]
        items = build_items(points, policy, np.random.default_rng(2))
        assert any(item.hue > 300.0 for item in items)
        for item in items:
            assert 0.0 <= item.hue < 360.0
            assert hue_distance(item.hue, 5.0) <= 20.0 + 1e-9


class TestGenerateField:
    """Tests for the sample-then-build pipeline."""

    def test_same_seed_same_field(self):
        a, _ = generate_field(300, 200, seed=21)
        b, _ = generate_field(300, 200, seed=21)
        assert [item.to_dict() for item in a] == [item.to_dict() for item in b]

    def test_report(self):
        items, report = generate_field(300, 200, seed=22)
        assert report.success
        assert report.metadata["n_items"] == len(items)
        assert len(items) > 0

    def test_empty_domain(self):
        items, report = generate_field(0, 0, seed=1)
        assert items == []
        assert report.warnings

    def test_disabled(self):
        items, report = generate_field(100, 100, FieldSamplingPolicy(enabled=False))
        assert items == []
        assert report.metadata["n_items"] == 0

    def test_invalid_policy_raises(self):
        with pytest.raises(ValueError):
            generate_field(100, 100, FieldSamplingPolicy(radius_min=10.0, radius_max=5.0))
