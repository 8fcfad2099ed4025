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

"""Quad ingestor, parses the fetched body into a QuadStore.

The parser reads the response stream directly; nothing is buffered
ahead of it. Its output is drained completely before the store is
returned, so the query stage always sees the whole source graph.
"""

from __future__ import annotations

from typing import BinaryIO

from rdflib import Dataset, Graph

from rdf_etl.formats import QUAD_FORMATS, resolve_format
from rdf_etl.logger import get_logger
from rdf_etl.result import Ok, ParseError, Result
from rdf_etl.store import Quad, QuadStore, graph_name

log = get_logger(__name__)


def _parse_quads(body: BinaryIO, fmt: str, base_iri: str) -> list[Quad]:
    """Run the rdflib parser and collect everything it produced."""
    if fmt in QUAD_FORMATS:
        dataset = Dataset()
        dataset.parse(source=body, format=fmt, publicID=base_iri)
        return [
            Quad(s, p, o, graph_name(c))
            for s, p, o, c in dataset.quads((None, None, None, None))
        ]

    graph = Graph()
    graph.parse(source=body, format=fmt, publicID=base_iri)
    return [Quad(s, p, o) for s, p, o in graph]


def ingest(body: BinaryIO, content_type: str, base_iri: str) -> Result[QuadStore]:
    """Parse body as content_type, resolving relative IRIs against base_iri."""
    fmt = resolve_format(content_type, base_iri)
    if fmt is None:
        return ParseError(
            error=f"Unrecognized RDF content type: {content_type}",
            context=base_iri,
        )

    log.info("Parsing %s as '%s'", content_type, fmt)
    try:
        quads = _parse_quads(body, fmt, base_iri)
    except Exception as exc:
        return ParseError(
            error=f"Failed to parse RDF ({content_type}): {type(exc).__name__}: {exc}",
            context=base_iri,
        )

    store = QuadStore(quads)
    log.info("Parsed %d statements into store of %d quads", len(quads), len(store))
    return Ok(data=store)
