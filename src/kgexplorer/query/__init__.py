"""Cypher-like pattern query over the in-memory triple collection."""

from kgexplorer.query.engine import (
    QueryOutcome,
    filter_and_project,
    filter_triples,
    run_query,
)
from kgexplorer.query.parser import (
    Condition,
    ParseError,
    ParseErrorKind,
    ParseResult,
    QueryError,
    QueryField,
    parse_query,
)

__all__ = [
    # Parser
    "Condition",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "QueryError",
    "QueryField",
    "parse_query",
    # Engine
    "QueryOutcome",
    "filter_triples",
    "filter_and_project",
    "run_query",
]
