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

"""Result publisher, serializes quads to Turtle and writes them to a graph store.

One request per run: PUT replaces the addressed graph, POST appends to it.
"""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from collections.abc import Sequence

import certifi
from rdflib import Graph

from rdf_etl.config import WriteMethod
from rdf_etl.logger import get_logger
from rdf_etl.result import Ok, PublishError, Result
from rdf_etl.store import Quad

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())

TURTLE_CONTENT_TYPE = "text/turtle"


def serialize_turtle(quads: Sequence[Quad]) -> str:
    """Render quads as one Turtle document. Graph names are dropped."""
    graph = Graph()
    named = 0
    for quad in quads:
        graph.add(quad.triple)
        if quad.graph is not None:
            named += 1
    if named:
        log.warning("Flattened %d named-graph quads into the Turtle default graph", named)
    return graph.serialize(format="turtle")


def publish(quads: Sequence[Quad], store_url: str, method: WriteMethod) -> Result[int]:
    """Write quads to store_url with the HTTP verb for method."""
    ttl = serialize_turtle(quads)
    payload = ttl.encode("utf-8")

    req = urllib.request.Request(
        store_url,
        data=payload,
        headers={"Content-Type": TURTLE_CONTENT_TYPE},
        method=method.value,
    )

    log.info("%s → %s (%d bytes)", method.value, store_url, len(payload))

    try:
        with urllib.request.urlopen(req, context=_ssl_ctx) as resp:  # noqa: S310
            status = resp.status
    except urllib.error.HTTPError as exc:
        try:
            body = exc.read().decode("utf-8", errors="replace")
        except OSError:
            body = ""
        return PublishError(
            error=f"Failed to write to STORE: {exc.code} {exc.reason}\n{body}",
            context=store_url,
            status=exc.code,
            reason=str(exc.reason),
            body=body,
        )
    except urllib.error.URLError as exc:
        return PublishError(
            error=f"Connection error: {exc.reason} ({store_url})",
            context=store_url,
            reason=str(exc.reason),
        )

    return Ok(data=status)
