"""
Unit tests for spacing and coverage helpers.
"""

import math

import numpy as np

from rootfield.core.types import Point2D
from rootfield.analysis.spacing import min_pairwise_distance, find_coverage_gap, uncovered_fraction


class TestMinPairwiseDistance:

    def test_known_points(self):
        points = [Point2D(0, 0), Point2D(3, 4), Point2D(10, 0)]
        assert min_pairwise_distance(points) == 5.0

    def test_fewer_than_two(self):
        assert math.isinf(min_pairwise_distance([]))
        assert math.isinf(min_pairwise_distance([Point2D(1, 1)]))


class TestCoverage:

    def test_dense_grid_has_no_gap(self):
        points = [Point2D(float(x), float(y)) for x in range(0, 101, 2) for y in range(0, 101, 2)]
        gap = find_coverage_gap(points, 100, 100, 5.0, n_probes=2000, rng=np.random.default_rng(0))
        assert gap is None
        assert uncovered_fraction(points, 100, 100, 5.0, n_probes=2000, rng=np.random.default_rng(0)) == 0.0

    def test_single_point_leaves_gap(self):
        points = [Point2D(0.0, 0.0)]
        gap = find_coverage_gap(points, 100, 100, 5.0, n_probes=2000, rng=np.random.default_rng(1))
        assert gap is not None
        x, y = gap
        assert 0 <= x < 100 and 0 <= y < 100
        assert math.hypot(x, y) >= 5.0

    def test_empty_point_set(self):
        assert find_coverage_gap([], 10, 10, 1.0, n_probes=5) is not None
        assert uncovered_fraction([], 10, 10, 1.0) == 1.0
