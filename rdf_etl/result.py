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

"""Result pattern for error handling without exceptions.

Provides Ok[T] and Fail types as an alternative to raising exceptions.
Every pipeline stage returns Result[T] = Ok[T] | Fail.

Stage failures are Fail subclasses so callers can tell them apart with
isinstance() while still checking ``.ok`` like any other result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message and optional context."""

    error: str
    context: Any = None
    ok: bool = field(default=False, init=False)


# ── Stage failures ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ConfigError(Fail):
    """Missing or invalid run parameter. ``field`` names the variable."""

    field: str = ""


@dataclass(frozen=True, slots=True)
class FetchError(Fail):
    """Source download failed. ``status`` is None for transport errors."""

    status: int | None = None
    reason: str = ""


@dataclass(frozen=True, slots=True)
class ParseError(Fail):
    """Source body could not be parsed as RDF."""


@dataclass(frozen=True, slots=True)
class QueryError(Fail):
    """SPARQL query failed to parse or evaluate."""


@dataclass(frozen=True, slots=True)
class PublishError(Fail):
    """Graph store write failed."""

    status: int | None = None
    reason: str = ""
    body: str = ""


Result = Ok[T] | Fail
