#!/usr/bin/env python3
"""Run a pattern query against a triples dataset file without the API.

Usage:
    uv run python scripts/query_triples.py 'MATCH (s)-[p]->(o) WHERE s = "microgravity"'
    uv run python scripts/query_triples.py --dataset data/kg_triples_validated.json --limit 20 'MATCH (s)-[p]->(o)'
    uv run python scripts/query_triples.py --graph 'MATCH (s)-[p]->(o) WHERE o = "DNA"'
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

# Add src to path
sys.path.insert(0, "src")

from kgexplorer.config import settings
from kgexplorer.query import QueryError, filter_and_project, parse_query
from kgexplorer.storage import DatasetLoader, DatasetLoadError


async def run(dataset: str, query: str, limit: int, show_graph: bool) -> int:
    """Load the dataset, run the query and print the outcome."""
    try:
        triples = await DatasetLoader(path=dataset).load()
    except DatasetLoadError as e:
        print(f"Failed to load triples dataset: {e}", file=sys.stderr)
        return 1

    parsed = parse_query(query)
    if parsed.empty:
        print("Empty query, nothing to do.")
        return 0

    try:
        condition = parsed.unwrap()
    except QueryError as e:
        print(str(e), file=sys.stderr)
        return 1

    outcome = filter_and_project(triples, condition, limit=limit)

    print(f"\n=== Results ({len(outcome.results)}) ===\n")
    for t in outcome.results:
        print(f"  {t.subject}  --[{t.predicate}]-->  {t.object}")

    print(f"\nGraph: {len(outcome.graph.nodes)} nodes, {len(outcome.graph.links)} links")
    if show_graph:
        print(json.dumps(outcome.graph.to_dict(), indent=2, ensure_ascii=False))

    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Query a triples dataset")
    parser.add_argument("query", help='e.g. MATCH (s)-[p]->(o) WHERE s = "microgravity"')
    parser.add_argument("--dataset", default=settings.dataset_path, help="Path to the JSON dataset")
    parser.add_argument("--limit", type=int, default=settings.query_result_limit, help="Max results")
    parser.add_argument("--graph", action="store_true", help="Print the graph projection as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    sys.exit(asyncio.run(run(args.dataset, args.query, args.limit, args.graph)))


if __name__ == "__main__":
    main()
