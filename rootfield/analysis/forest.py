"""
Forest analysis of the consumed items.

Consumed items and their parent references form a forest of child -> parent
edges. This module exports it to networkx and computes summary metrics.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Sequence
import logging
import math
import networkx as nx

from ..core.item import FieldItem, ROOT_PARENT

logger = logging.getLogger(__name__)


@dataclass
class ForestMetrics:
    """
    Computed metrics for a grown root forest.
    
    Lengths are center-to-center, in pixels.
    """
    consumed_count: int = 0
    root_count: int = 0
    leaf_count: int = 0
    branch_point_count: int = 0
    max_depth: int = 0
    total_edge_length: float = 0.0
    root_sizes: Dict[int, int] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "consumed_count": self.consumed_count,
            "root_count": self.root_count,
            "leaf_count": self.leaf_count,
            "branch_point_count": self.branch_point_count,
            "max_depth": self.max_depth,
            "total_edge_length": self.total_edge_length,
            "root_sizes": {str(k): v for k, v in self.root_sizes.items()},
        }


def to_networkx_graph(items: Sequence[FieldItem]) -> nx.DiGraph:
    """
    Convert consumed items to a directed child -> parent graph.
    
    Parameters
    ----------
    items : Sequence[FieldItem]
        Item store indexed by id
    
    Returns
    -------
    nx.DiGraph
        One node per consumed item (attributes x, y, hue, radius, root) and
        one edge per non-root consumed item
    """
    G = nx.DiGraph()
    for item in items:
        if not item.consumed:
            continue
        G.add_node(
            item.id,
            x=item.x,
            y=item.y,
            hue=item.hue,
            radius=item.radius,
            root=item.parent == ROOT_PARENT,
        )
    
    for item in items:
        if item.consumed and item.parent is not None and item.parent != ROOT_PARENT:
            parent = items[item.parent]
            length = math.hypot(item.x - parent.x, item.y - parent.y)
            G.add_edge(item.id, item.parent, length=length)
    
    return G


def is_forest(items: Sequence[FieldItem]) -> bool:
    """
    Check that consumed items form a forest rooted at seeded roots.
    
    Every consumed non-root item must point at a consumed parent, and the
    child -> parent graph must be acyclic.
    """
    for item in items:
        if item.consumed and item.parent is None:
            return False
        if not item.consumed and item.parent is not None:
            return False
        if item.consumed and item.parent != ROOT_PARENT:
            if not 0 <= item.parent < len(items) or not items[item.parent].consumed:
                return False
    
    # Out-degree is at most 1, so acyclic means forest
    return nx.is_directed_acyclic_graph(to_networkx_graph(items))


def compute_forest_metrics(items: Sequence[FieldItem]) -> ForestMetrics:
    """
    Compute summary metrics for the consumed forest.
    
    Parameters
    ----------
    items : Sequence[FieldItem]
        Item store indexed by id
    
    Returns
    -------
    ForestMetrics
        Computed metrics
    """
    G = to_networkx_graph(items)
    metrics = ForestMetrics()
    metrics.consumed_count = G.number_of_nodes()
    
    if metrics.consumed_count == 0:
        return metrics
    
    roots = [n for n, is_root in G.nodes(data="root") if is_root]
    metrics.root_count = len(roots)
    
    # Edges point child -> parent, so children are predecessors
    metrics.leaf_count = sum(1 for n in G.nodes if G.in_degree(n) == 0)
    metrics.branch_point_count = sum(1 for n in G.nodes if G.in_degree(n) >= 2)
    metrics.total_edge_length = float(sum(length for _, _, length in G.edges(data="length")))
    
    reversed_view = G.reverse(copy=False)
    for root in roots:
        depths = nx.single_source_shortest_path_length(reversed_view, root)
        metrics.root_sizes[root] = len(depths)
        metrics.max_depth = max(metrics.max_depth, max(depths.values()))
    
    logger.debug(f"Forest metrics: {metrics.to_dict()}")
    
    return metrics
