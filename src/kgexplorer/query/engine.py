"""Filter triples by a parsed condition and project the result to a graph."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from kgexplorer.graph.projection import build_projection
from kgexplorer.models import GraphProjection, Triple
from kgexplorer.query.parser import Condition, ParseError, QueryField, parse_query

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 100


@dataclass
class QueryOutcome:
    """Bounded result set plus its graph projection."""

    results: list[Triple] = field(default_factory=list)
    graph: GraphProjection = field(default_factory=GraphProjection)
    condition: Condition | None = None
    error: ParseError | None = None
    cleared: bool = False  # Blank query: caller should wipe its results

    @property
    def ok(self) -> bool:
        return self.error is None


def _field_value(triple: Triple, query_field: QueryField) -> str:
    if query_field is QueryField.SUBJECT:
        return triple.subject
    if query_field is QueryField.PREDICATE:
        return triple.predicate
    if query_field is QueryField.OBJECT:
        return triple.object
    raise ValueError(f"Unknown condition field: {query_field!r}")


def filter_triples(triples: Sequence[Triple], condition: Condition | None) -> list[Triple]:
    """Return the working set: all triples, or those whose field equals the value.

    Comparison is exact after lower-casing both sides. Dataset order is kept.
    """
    if condition is None:
        return list(triples)

    if not isinstance(condition.field, QueryField):
        raise ValueError(f"Unknown condition field: {condition.field!r}")

    value = condition.value.lower()
    return [t for t in triples if _field_value(t, condition.field).lower() == value]


def filter_and_project(
    triples: Sequence[Triple],
    condition: Condition | None,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> QueryOutcome:
    """Filter, truncate to the first `limit` triples, and build the projection."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    working_set = filter_triples(triples, condition)
    results = working_set[:limit]

    return QueryOutcome(
        results=results,
        graph=build_projection(results),
        condition=condition,
    )


def run_query(
    triples: Sequence[Triple],
    query: str,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> QueryOutcome:
    """Parse a raw query and, if valid, filter and project the triples."""
    parsed = parse_query(query)

    if parsed.empty:
        return QueryOutcome(cleared=True)

    if parsed.error is not None:
        return QueryOutcome(error=parsed.error)

    outcome = filter_and_project(triples, parsed.condition, limit)
    logger.debug(
        f"Query matched {len(outcome.results)} triples "
        f"({len(outcome.graph.nodes)} nodes, {len(outcome.graph.links)} links)"
    )
    return outcome
