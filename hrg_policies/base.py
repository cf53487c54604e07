"""
Base utilities for HRG policies.

This module provides shared helpers and the OperationReport dataclass
returned by the sampling and field-building operations.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List
import json


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a value to float, with fallback to default.
    
    Parameters
    ----------
    value : Any
        Value to coerce (numbers and numeric strings are accepted)
    default : float
        Default value if coercion fails
        
    Returns
    -------
    float
        Coerced float value
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def alias_fields(d: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """
    Apply field aliases to a dictionary.
    
    This allows camelCase controller keys (``driftRate``) to be mapped to
    the canonical snake_case policy names (``drift_rate``). A canonical key
    that is already present wins over its alias.
    
    Parameters
    ----------
    d : dict
        Input dictionary
    aliases : dict
        Mapping of alias_name -> canonical_name
        
    Returns
    -------
    dict
        Dictionary with aliases applied
    """
    result = d.copy()
    for alias_name, canonical_name in aliases.items():
        if alias_name in result:
            value = result.pop(alias_name)
            if canonical_name not in result:
                result[canonical_name] = value
    return result


@dataclass
class OperationReport:
    """
    Standard report structure for field operations.
    
    Every operation returns a report with requested vs effective policy,
    warnings, and operation-specific metadata.
    
    The "requested vs effective" pattern records runtime adjustments, e.g.
    a seed drawn at run time when the requested policy left it unset.
    """
    operation: str = "unknown"
    success: bool = True
    requested_policy: Dict[str, Any] = field(default_factory=dict)
    effective_policy: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
    
    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
    
    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)
    
    def add_error(self, message: str) -> None:
        """Add an error message and mark as failed."""
        self.errors.append(message)
        self.success = False
    
    def merge(self, other: "OperationReport") -> None:
        """Merge another report into this one."""
        self.warnings.extend(other.warnings)
        self.errors.extend(other.errors)
        if not other.success:
            self.success = False
        self.metadata.update(other.metadata)


def policy_from_dict(cls, d: Optional[Dict[str, Any]], aliases: Optional[Dict[str, str]] = None):
    """
    Build a policy dataclass from a dictionary, dropping unknown keys.
    
    Parameters
    ----------
    cls : type
        Policy dataclass
    d : dict, optional
        Serialized policy; None yields the defaults
    aliases : dict, optional
        Alias -> canonical field name mapping applied before filtering
    """
    if not d:
        return cls()
    if aliases:
        d = alias_fields(d, aliases)
    return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


__all__ = [
    "OperationReport",
    "coerce_float",
    "alias_fields",
    "policy_from_dict",
]
