"""Derive renderable graphs from triples.

Two views are built here:
- the query projection: exact-string node ids, group by first appearance
- the overview graph: normalized (lowercase, trimmed) ids with weights
"""

import logging
from collections.abc import Iterable, Sequence

from kgexplorer.models import (
    GraphLink,
    GraphNode,
    GraphProjection,
    GraphStats,
    NodeGroup,
    OverviewGraph,
    OverviewLink,
    OverviewNode,
    Triple,
)

logger = logging.getLogger(__name__)

# Weight added to an overview node each time it reappears
REPEAT_WEIGHT = 0.5


def normalize_entity(text: str) -> str:
    """Normalize entity text for overview node identity."""
    return text.lower().strip()


def build_projection(triples: Iterable[Triple]) -> GraphProjection:
    """Build the {nodes, links} projection for a set of triples.

    Iterates once, in order. Incomplete triples are skipped. A node keeps
    the group of its first appearance; links are not deduplicated.
    """
    nodes: dict[str, GraphNode] = {}
    links: list[GraphLink] = []
    skipped = 0

    for triple in triples:
        if not triple.is_complete:
            skipped += 1
            continue

        if triple.subject not in nodes:
            nodes[triple.subject] = GraphNode(id=triple.subject, group=NodeGroup.SUBJECT)
        if triple.object not in nodes:
            nodes[triple.object] = GraphNode(id=triple.object, group=NodeGroup.OBJECT)

        links.append(GraphLink(
            source=triple.subject,
            target=triple.object,
            predicate=triple.predicate,
            title=triple.title,
        ))

    if skipped:
        logger.warning(f"Skipped {skipped} incomplete triples while building projection")

    return GraphProjection(nodes=list(nodes.values()), links=links)


def build_overview(triples: Sequence[Triple], sample_limit: int | None = None) -> OverviewGraph:
    """Build the overview graph from the leading triples of the dataset.

    Node ids are normalized so that case variants collapse into one node;
    every repeated appearance grows the node's weight.
    """
    sample = triples if sample_limit is None else triples[:sample_limit]

    nodes: dict[str, OverviewNode] = {}
    links: list[OverviewLink] = []

    for triple in sample:
        if not triple.is_complete:
            continue

        subject_id = normalize_entity(triple.subject)
        object_id = normalize_entity(triple.object)

        _touch(nodes, subject_id, triple.subject, "subject")
        _touch(nodes, object_id, triple.object, "object")

        links.append(OverviewLink(
            source=subject_id,
            target=object_id,
            label=triple.predicate,
            title=triple.title,
        ))

    return OverviewGraph(nodes=list(nodes.values()), links=links)


def _touch(nodes: dict[str, OverviewNode], node_id: str, name: str, node_type: str) -> None:
    node = nodes.get(node_id)
    if node is None:
        nodes[node_id] = OverviewNode(id=node_id, name=name, type=node_type)
    else:
        node.val += REPEAT_WEIGHT


def compute_stats(triples: Sequence[Triple]) -> GraphStats:
    """Compute node/edge counts of the full overview graph.

    Distinct subjects and objects are counted over every triple, incomplete
    ones included.
    """
    overview = build_overview(triples)
    return GraphStats(
        triples=len(triples),
        nodes=len(overview.nodes),
        edges=len(overview.links),
        subjects=len({normalize_entity(t.subject) for t in triples}),
        objects=len({normalize_entity(t.object) for t in triples}),
    )


def search_nodes(overview: OverviewGraph, term: str, limit: int = 20) -> list[OverviewNode]:
    """Case-insensitive substring search over overview node names."""
    needle = term.strip().lower()
    if not needle:
        return []

    hits = []
    for node in overview.nodes:
        if needle in node.name.lower():
            hits.append(node)
            if len(hits) >= limit:
                break
    return hits
