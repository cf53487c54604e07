"""
HRG Policies - Centralized policy definitions for Hue Root Growth.

This package provides the policy dataclasses used by the rootfield engine.
All policies are JSON-serializable and support the "requested vs effective"
pattern for tracking runtime adjustments.

Usage:
    from hrg_policies import RootGrowthPolicy, FieldSamplingPolicy, OperationReport
"""

from .base import (
    OperationReport,
    coerce_float,
    alias_fields,
    policy_from_dict,
)

from .sampling import FieldSamplingPolicy
from .growth import RootGrowthPolicy, GROWTH_ALIASES

__all__ = [
    # Base
    "OperationReport",
    "coerce_float",
    "alias_fields",
    "policy_from_dict",
    # Policies
    "FieldSamplingPolicy",
    "RootGrowthPolicy",
    "GROWTH_ALIASES",
]
