"""
Unit tests for HRG policy dataclasses and base helpers.
"""

import json

import pytest

from hrg_policies import (
    FieldSamplingPolicy,
    RootGrowthPolicy,
    OperationReport,
    alias_fields,
    coerce_float,
)


class TestRootGrowthPolicy:

    def test_defaults_valid(self):
        policy = RootGrowthPolicy()
        assert policy.validate() == []
        assert policy.tolerance == 30.0
        assert policy.drift_rate == 2.0
        assert policy.reach_distance == 50.0
        assert policy.max_active_tips == 10
        assert policy.start_hue is None

    def test_from_dict_drops_unknown_and_maps_aliases(self):
        policy = RootGrowthPolicy.from_dict({
            "tolerance": 12.0,
            "driftRate": 4.0,
            "maxActiveTips": 6,
            "colour": "red",
        })
        assert policy.tolerance == 12.0
        assert policy.drift_rate == 4.0
        assert policy.max_active_tips == 6

    def test_from_dict_empty(self):
        assert RootGrowthPolicy.from_dict({}) == RootGrowthPolicy()

    def test_round_trip(self):
        policy = RootGrowthPolicy(start_hue=200.0, max_root_tips=2)
        assert RootGrowthPolicy.from_dict(json.loads(json.dumps(policy.to_dict()))) == policy

    @pytest.mark.parametrize("field,value", [
        ("tolerance", -1.0),
        ("drift_rate", -0.5),
        ("reach_distance", 0.0),
        ("max_active_tips", -1),
        ("max_root_tips", -2),
        ("trunk_width", -10.0),
    ])
    def test_invalid_values(self, field, value):
        policy = RootGrowthPolicy(**{field: value})
        errors = policy.validate()
        assert len(errors) == 1
        assert field.split("_")[0] in errors[0]


class TestFieldSamplingPolicy:

    def test_defaults_valid(self):
        policy = FieldSamplingPolicy()
        assert policy.validate() == []
        assert policy.min_dist == 35.0
        assert policy.k == 30

    def test_min_dist_alias(self):
        assert FieldSamplingPolicy.from_dict({"minDist": 12}).min_dist == 12

    def test_invalid(self):
        policy = FieldSamplingPolicy(min_dist=0.0, k=-1, hue_spread=200.0)
        assert len(policy.validate()) == 3


class TestBaseHelpers:

    def test_coerce_float(self):
        assert coerce_float("2.5") == 2.5
        assert coerce_float(None, 1.0) == 1.0
        assert coerce_float("abc", 3.0) == 3.0
        assert coerce_float(True, 4.0) == 4.0

    def test_alias_fields_canonical_wins(self):
        result = alias_fields({"driftRate": 1, "drift_rate": 2}, {"driftRate": "drift_rate"})
        assert result == {"drift_rate": 2}

    def test_operation_report(self):
        report = OperationReport(operation="op")
        report.add_warning("careful")
        assert report.success
        report.add_error("broken")
        assert not report.success
        d = json.loads(report.to_json())
        assert d["warnings"] == ["careful"]
        assert d["errors"] == ["broken"]

    def test_report_merge(self):
        a = OperationReport(operation="a", metadata={"x": 1})
        b = OperationReport(operation="b", success=False, warnings=["w"], metadata={"y": 2})
        a.merge(b)
        assert not a.success
        assert a.warnings == ["w"]
        assert a.metadata == {"x": 1, "y": 2}
