"""Data models for graph projections handed to the force-graph renderer."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Literal


class NodeGroup(IntEnum):
    """How a node was first discovered."""

    SUBJECT = 1
    OBJECT = 2


@dataclass
class GraphNode:
    """Entity node; identity is the exact entity string."""

    id: str
    group: NodeGroup

    def to_dict(self) -> dict:
        return {"id": self.id, "group": int(self.group)}


@dataclass
class GraphLink:
    """Directed edge from subject to object, labelled by predicate.

    Endpoints are always bare node ids, never node objects.
    """

    source: str
    target: str
    predicate: str
    title: str | None = None

    def to_dict(self) -> dict:
        data = {
            "source": self.source,
            "target": self.target,
            "predicate": self.predicate,
        }
        if self.title is not None:
            data["title"] = self.title
        return data


@dataclass
class GraphProjection:
    """The {nodes, links} structure derived from a set of triples."""

    nodes: list[GraphNode] = field(default_factory=list)
    links: list[GraphLink] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes and not self.links

    def to_dict(self) -> dict:
        """Convert to the renderer's {nodes, links} shape."""
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }


@dataclass
class OverviewNode:
    """Node of the full-dataset overview graph (normalized id)."""

    id: str  # Lowercase, trimmed entity text
    name: str  # Entity text as first seen
    type: Literal["subject", "object"]
    val: float = 1.0  # Grows with every repeated appearance

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "type": self.type, "val": self.val}


@dataclass
class OverviewLink:
    """Link of the overview graph."""

    source: str
    target: str
    label: str
    title: str | None = None

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "label": self.label,
            "title": self.title,
        }


@dataclass
class OverviewGraph:
    """Overview graph over a sample of the dataset."""

    nodes: list[OverviewNode] = field(default_factory=list)
    links: list[OverviewLink] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }


@dataclass
class GraphStats:
    """Dataset-wide graph statistics."""

    triples: int = 0
    nodes: int = 0
    edges: int = 0
    subjects: int = 0  # Distinct normalized subjects
    objects: int = 0  # Distinct normalized objects

    def to_dict(self) -> dict:
        return {
            "triples": self.triples,
            "nodes": self.nodes,
            "edges": self.edges,
            "subjects": self.subjects,
            "objects": self.objects,
        }
