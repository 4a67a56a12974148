"""API routes for kgexplorer.

Provides:
- /api/query for Cypher-like pattern queries over the triples
- /api/stats and /api/nodes/search for the explorer page
- /health
"""

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, Field

from kgexplorer import __version__
from kgexplorer.api.graph import get_dataset, get_settings
from kgexplorer.graph import build_overview, compute_stats, search_nodes
from kgexplorer.models import Triple
from kgexplorer.query import QueryOutcome, run_query
from kgexplorer.storage import DatasetState

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Query Models
# ============================================================================


class QueryRequest(BaseModel):
    """Pattern query submitted from the query box."""

    query: str = ""


class TripleInfo(BaseModel):
    """Triple as returned to the client."""

    subject: str
    predicate: str
    object: str
    title: str | None = None
    chunk_id: str | None = None
    faiss_verified: bool | None = None

    @classmethod
    def from_triple(cls, triple: Triple) -> "TripleInfo":
        return cls(**triple.to_dict())


class NodeInfo(BaseModel):
    id: str
    group: Literal[1, 2]


class LinkInfo(BaseModel):
    source: str
    target: str
    predicate: str
    title: str | None = None


class GraphData(BaseModel):
    """Projection in the force-graph {nodes, links} shape."""

    nodes: list[NodeInfo] = []
    links: list[LinkInfo] = []


class ConditionInfo(BaseModel):
    field: Literal["subject", "predicate", "object"]
    value: str


class QueryResponse(BaseModel):
    """Query results and their graph projection."""

    query: str
    condition: ConditionInfo | None = None
    count: int = 0
    results: list[TripleInfo] = []
    graph: GraphData = Field(default_factory=GraphData)


# ============================================================================
# Explorer Models
# ============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    dataset_loaded: bool
    triples_count: int = 0
    error: str | None = None
    version: str = __version__


class StatsResponse(BaseModel):
    """Dataset-wide graph statistics."""

    triples: int
    nodes: int
    edges: int
    subjects: int
    objects: int


class NodeSearchResult(BaseModel):
    """Overview node matching a search term."""

    id: str
    name: str
    type: Literal["subject", "object"]
    val: float


# ============================================================================
# Helper Functions
# ============================================================================


def to_response(query: str, outcome: QueryOutcome) -> QueryResponse:
    """Convert a successful query outcome to the response model."""
    return QueryResponse(
        query=query,
        condition=(
            ConditionInfo(**outcome.condition.to_dict())
            if outcome.condition
            else None
        ),
        count=len(outcome.results),
        results=[TripleInfo.from_triple(t) for t in outcome.results],
        graph=GraphData(
            nodes=[NodeInfo(id=n.id, group=int(n.group)) for n in outcome.graph.nodes],
            links=[
                LinkInfo(
                    source=link.source,
                    target=link.target,
                    predicate=link.predicate,
                    title=link.title,
                )
                for link in outcome.graph.links
            ],
        ),
    )


# ============================================================================
# Query Endpoint
# ============================================================================


@router.post("/api/query", response_model=QueryResponse)
async def query_triples(
    request: Request,
    body: QueryRequest,
) -> QueryResponse:
    """
    Run a pattern query over the triples.

    A blank query clears results (200, empty). A query that fails
    validation returns 400 with a human-readable message.
    """
    dataset = get_dataset(request)
    limit = get_settings(request).query_result_limit

    outcome = run_query(dataset.triples, body.query, limit=limit)

    if outcome.error is not None:
        raise HTTPException(status_code=400, detail=outcome.error.message)

    return to_response(body.query, outcome)


# ============================================================================
# Explorer Endpoints
# ============================================================================


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint."""
    dataset: DatasetState | None = getattr(request.app.state, "dataset", None)

    if dataset is None or not dataset.loaded:
        return HealthResponse(
            status="degraded",
            dataset_loaded=False,
            error=dataset.error if dataset else None,
        )

    return HealthResponse(
        status="healthy",
        dataset_loaded=True,
        triples_count=len(dataset.triples),
    )


@router.get("/api/stats", response_model=StatsResponse)
async def get_stats(request: Request) -> StatsResponse:
    """Get node, edge, subject and object counts for the whole dataset."""
    dataset = get_dataset(request)
    stats = compute_stats(dataset.triples)
    return StatsResponse(**stats.to_dict())


@router.get("/api/nodes/search", response_model=list[NodeSearchResult])
async def search_graph_nodes(
    request: Request,
    q: str = "",
    limit: int | None = Query(default=None, ge=1),
) -> list[NodeSearchResult]:
    """Find overview nodes whose name contains the search term."""
    dataset = get_dataset(request)
    max_hits = limit or get_settings(request).node_search_limit

    overview = build_overview(dataset.triples)
    hits = search_nodes(overview, q, limit=max_hits)
    return [NodeSearchResult(**node.to_dict()) for node in hits]
