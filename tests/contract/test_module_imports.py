"""
Test that all modules can be imported without collisions.

This module validates that the public packages import cleanly without
circular dependencies and expose their documented names.
"""

import pytest


class TestHRGPoliciesImport:
    """Test hrg_policies package imports cleanly."""

    def test_hrg_policies_import(self):
        import hrg_policies

        assert hasattr(hrg_policies, "RootGrowthPolicy")
        assert hasattr(hrg_policies, "FieldSamplingPolicy")
        assert hasattr(hrg_policies, "OperationReport")


class TestRootfieldImport:
    """Test rootfield package imports cleanly."""

    def test_rootfield_import(self):
        import rootfield

        for name in rootfield.__all__:
            assert hasattr(rootfield, name), name

    @pytest.mark.parametrize("module", [
        "rootfield.core",
        "rootfield.spatial",
        "rootfield.sampling",
        "rootfield.ops",
        "rootfield.analysis",
        "rootfield.utils",
        "rootfield.driver",
        "rootfield.cli",
    ])
    def test_submodule_import(self, module):
        import importlib

        assert importlib.import_module(module) is not None
