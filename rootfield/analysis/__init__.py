"""Analysis of sampled fields and grown forests."""

from .forest import ForestMetrics, to_networkx_graph, is_forest, compute_forest_metrics
from .spacing import min_pairwise_distance, find_coverage_gap, uncovered_fraction

__all__ = [
    "ForestMetrics",
    "to_networkx_graph",
    "is_forest",
    "compute_forest_metrics",
    "min_pairwise_distance",
    "find_coverage_gap",
    "uncovered_fraction",
]
