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

"""In-memory quad store backed by an rdflib Dataset.

Set semantics come from the underlying store: adding an identical quad
twice leaves the size unchanged. The default graph is the union of all
graphs when queried.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rdflib import Dataset, Graph
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID
from rdflib.term import Node


@dataclass(frozen=True, slots=True)
class Quad:
    """One RDF statement. ``graph`` is None for the default graph."""

    subject: Node
    predicate: Node
    object: Node
    graph: Node | None = None

    @property
    def triple(self) -> tuple[Node, Node, Node]:
        return (self.subject, self.predicate, self.object)


def graph_name(context: Graph | Node | None) -> Node | None:
    """Normalize whatever rdflib yields as a quad context to a graph name."""
    if context is None:
        return None
    name = context.identifier if isinstance(context, Graph) else context
    if name == DATASET_DEFAULT_GRAPH_ID:
        return None
    return name


class QuadStore:
    """Append-only while ingesting, read-only once handed to the query stage."""

    def __init__(self, quads: Iterable[Quad] = ()) -> None:
        self._dataset = Dataset(default_union=True)
        for quad in quads:
            self.add(quad)

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def _context(self, name: Node | None) -> Graph:
        if name is None:
            return self._dataset.default_context
        return self._dataset.get_context(name)

    def add(self, quad: Quad) -> None:
        if quad.graph is None:
            self._dataset.add(quad.triple)
        else:
            self._dataset.add((*quad.triple, quad.graph))

    def __iter__(self) -> Iterator[Quad]:
        for s, p, o, c in self._dataset.quads((None, None, None, None)):
            yield Quad(s, p, o, graph_name(c))

    def __len__(self) -> int:
        # Per-graph counts: one triple held in two graphs is two quads.
        return sum(len(graph) for graph in self._dataset.store.contexts())

    def __contains__(self, quad: object) -> bool:
        if not isinstance(quad, Quad):
            return False
        return quad.triple in self._context(quad.graph)
