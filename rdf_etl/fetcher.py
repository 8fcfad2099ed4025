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

"""RDF fetcher, content-negotiated download of the source graph.

Hands back the open response so the parser can read the body as a
stream. Single attempt, no retry: a failed fetch aborts the run.
"""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import BinaryIO

import certifi

from rdf_etl.logger import get_logger
from rdf_etl.result import FetchError, Ok, Result

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())

# Order matters: servers that ignore q-values pick the first match.
ACCEPT_TYPES: tuple[str, ...] = (
    "text/turtle",
    "application/n-triples",
    "application/ld+json",
    "application/rdf+xml",
    "application/trig",
    "application/n-quads",
    "application/octet-stream;q=0.1",
    "*/*;q=0.01",
)
ACCEPT_HEADER = ", ".join(ACCEPT_TYPES)

DEFAULT_CONTENT_TYPE = "text/turtle"


@dataclass(frozen=True, slots=True)
class NegotiatedContent:
    """Response body stream plus the media type the server chose."""

    content_type: str
    body: BinaryIO
    url: str

    def close(self) -> None:
        self.body.close()


def media_type(header: str | None) -> str:
    """Strip parameters from a Content-Type header value."""
    if not header:
        return DEFAULT_CONTENT_TYPE
    value = header.split(";", 1)[0].strip()
    return value or DEFAULT_CONTENT_TYPE


def fetch_rdf(url: str) -> Result[NegotiatedContent]:
    """GET url asking for RDF serializations, return the unread body."""
    req = urllib.request.Request(
        url,
        headers={"Accept": ACCEPT_HEADER},
        method="GET",
    )
    try:
        resp = urllib.request.urlopen(req, context=_ssl_ctx)  # noqa: S310
    except urllib.error.HTTPError as exc:
        exc.close()
        return FetchError(
            error=f"Failed to fetch RDF: {exc.code} {exc.reason} ({url})",
            context=url,
            status=exc.code,
            reason=str(exc.reason),
        )
    except urllib.error.URLError as exc:
        return FetchError(
            error=f"Connection error: {exc.reason} ({url})",
            context=url,
            reason=str(exc.reason),
        )

    content_type = media_type(resp.headers.get("Content-Type"))
    log.info("Fetched %s → %d %s (%s)", url, resp.status, resp.reason, content_type)
    return Ok(data=NegotiatedContent(content_type=content_type, body=resp, url=url))
