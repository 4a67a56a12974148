"""Graph projections of triples for the force-graph renderer."""

from kgexplorer.graph.projection import (
    build_overview,
    build_projection,
    compute_stats,
    normalize_entity,
    search_nodes,
)

__all__ = [
    "build_projection",
    "build_overview",
    "compute_stats",
    "normalize_entity",
    "search_nodes",
]
