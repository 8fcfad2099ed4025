# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.
"""SPARQL query runner using rdflib's evaluator.

Evaluates one CONSTRUCT or DESCRIBE query against a QuadStore and returns
the produced statements as a list. Tabular results are rejected.

The store is the only data source: FROM / FROM NAMED select graphs already
held in the store and never trigger a download, and SERVICE is refused.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import rdflib.plugins.sparql
from rdflib.plugins.sparql import prepareQuery
from rdflib.plugins.sparql.algebra import traverse
from rdflib.plugins.sparql.parserutils import CompValue
from rdflib.plugins.sparql.sparql import Query

from rdf_etl.logger import get_logger
from rdf_etl.result import Ok, QueryError, Result
from rdf_etl.store import Quad, QuadStore

log = get_logger(__name__)

QUAD_RESULT_TYPES = frozenset({"CONSTRUCT", "DESCRIBE"})


@contextmanager
def _store_only() -> Iterator[None]:
    """Stop rdflib from fetching graphs named in FROM clauses."""
    previous = rdflib.plugins.sparql.SPARQL_LOAD_GRAPHS
    rdflib.plugins.sparql.SPARQL_LOAD_GRAPHS = False
    try:
        yield
    finally:
        rdflib.plugins.sparql.SPARQL_LOAD_GRAPHS = previous


def _has_service(prepared: Query) -> bool:
    found: list[CompValue] = []

    def visit(node: object) -> None:
        if isinstance(node, CompValue) and node.name == "ServiceGraphPattern":
            found.append(node)

    traverse(prepared.algebra, visitPre=visit)
    return bool(found)


def run_query(query: str, store: QuadStore) -> Result[list[Quad]]:
    """Evaluate query over store and materialize the resulting quads."""
    log.info("SPARQL query → in-memory store (%d chars)", len(query))

    try:
        prepared = prepareQuery(query)
        if _has_service(prepared):
            return QueryError(
                error="SERVICE clauses are not supported; the query may only read the loaded graph",
                context=query[:200],
            )
        with _store_only():
            result = store.dataset.query(prepared)
        if result.type not in QUAD_RESULT_TYPES:
            return QueryError(
                error=f"Query produced {result.type} results; expected CONSTRUCT or DESCRIBE",
                context=query[:200],
            )
        quads = [Quad(s, p, o) for s, p, o in result.graph]
    except Exception as exc:
        return QueryError(
            error=f"SPARQL evaluation failed: {type(exc).__name__}: {exc}",
            context=query[:200],
        )

    log.info("SPARQL returned %d quads", len(quads))
    return Ok(data=quads)
