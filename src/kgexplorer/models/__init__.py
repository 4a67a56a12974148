"""kgexplorer data models."""

from kgexplorer.models.graph import (
    GraphLink,
    GraphNode,
    GraphProjection,
    GraphStats,
    NodeGroup,
    OverviewGraph,
    OverviewLink,
    OverviewNode,
)
from kgexplorer.models.triple import Triple

__all__ = [
    "Triple",
    "NodeGroup",
    "GraphNode",
    "GraphLink",
    "GraphProjection",
    "OverviewNode",
    "OverviewLink",
    "OverviewGraph",
    "GraphStats",
]
