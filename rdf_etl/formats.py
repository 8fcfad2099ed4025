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

"""Media type → rdflib parser name lookup.

Generic types (octet-stream, plain text, bare XML/JSON) fall back to the
source URL's file extension before giving up.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from rdflib.util import guess_format

MEDIA_TYPES: dict[str, str] = {
    "text/turtle": "turtle",
    "application/x-turtle": "turtle",
    "application/turtle": "turtle",
    "application/n-triples": "nt",
    "text/n-triples": "nt",
    "application/ld+json": "json-ld",
    "application/rdf+xml": "xml",
    "application/trig": "trig",
    "application/x-trig": "trig",
    "application/n-quads": "nquads",
    "text/x-nquads": "nquads",
    "text/nquads": "nquads",
    "text/n3": "n3",
    "text/rdf+n3": "n3",
}

# Types that say nothing definite about the serialization. The value is
# used only when the URL extension does not name a format.
GENERIC_TYPES: dict[str, str | None] = {
    "application/octet-stream": None,
    "binary/octet-stream": None,
    "text/plain": "nt",
    "application/xml": "xml",
    "text/xml": "xml",
    "application/json": "json-ld",
}

# Formats whose parser can emit named graphs.
QUAD_FORMATS = frozenset({"trig", "nquads", "json-ld", "trix", "hext"})


def format_from_url(url: str) -> str | None:
    """Guess a parser name from the URL path's file extension."""
    path = urlsplit(url).path
    if not path or path.endswith("/"):
        return None
    return guess_format(path)


def resolve_format(content_type: str, url: str) -> str | None:
    """Pick the rdflib parser for a negotiated response, or None."""
    key = content_type.strip().lower()
    if key in MEDIA_TYPES:
        return MEDIA_TYPES[key]
    if key in GENERIC_TYPES or not key:
        return format_from_url(url) or GENERIC_TYPES.get(key)
    return None
