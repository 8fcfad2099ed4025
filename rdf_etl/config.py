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

"""Resolves run parameters from the process environment into a typed record.

Pure function of the environment mapping. Nothing else in the pipeline
reads os.environ. A dotenv file can seed the environment beforehand.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import urlsplit

from dotenv import find_dotenv, load_dotenv

from rdf_etl.result import ConfigError, Ok, Result


class WriteMethod(str, Enum):
    """Graph store write semantic, valued by the HTTP verb it maps to."""

    REPLACE = "PUT"
    APPEND = "POST"


_METHOD_ALIASES: dict[str, WriteMethod] = {
    "PUT": WriteMethod.REPLACE,
    "REPLACE": WriteMethod.REPLACE,
    "POST": WriteMethod.APPEND,
    "APPEND": WriteMethod.APPEND,
}


@dataclass(frozen=True, slots=True)
class EtlConfig:
    source_url: str
    query: str
    store_url: str
    write_method: WriteMethod = WriteMethod.APPEND


# ── Loader ─────────────────────────────────────────────────────


def load_env_file(path: Path | None = None) -> bool:
    """Seed os.environ from a dotenv file. Variables already set win."""
    if path is None:
        return load_dotenv(find_dotenv(usecwd=True), override=False)
    return load_dotenv(dotenv_path=path, override=False)


def _required(environ: Mapping[str, str], *names: str) -> str | None:
    """First non-blank value among names, or None."""
    for name in names:
        value = environ.get(name)
        if value is not None and value.strip():
            return value
    return None


def _is_absolute_uri(value: str) -> bool:
    parts = urlsplit(value)
    return bool(parts.scheme and parts.netloc)


def resolve_config(environ: Mapping[str, str] | None = None) -> Result[EtlConfig]:
    """Read URL, Query, STORE and METHOD into an EtlConfig.

    Args:
        environ: Variable mapping to read. Defaults to os.environ.
    """
    env = os.environ if environ is None else environ

    source_url = _required(env, "URL")
    if source_url is None:
        return ConfigError(error="Missing env var: URL", field="URL")
    source_url = source_url.strip()
    if not _is_absolute_uri(source_url):
        return ConfigError(
            error=f"URL must be an absolute URI (got: {source_url})",
            field="URL",
        )

    query = _required(env, "Query", "QUERY")
    if query is None:
        return ConfigError(error="Missing env var: Query", field="Query")

    store_url = _required(env, "STORE")
    if store_url is None:
        return ConfigError(error="Missing env var: STORE", field="STORE")
    store_url = store_url.strip()
    if not _is_absolute_uri(store_url):
        return ConfigError(
            error=f"STORE must be an absolute URI (got: {store_url})",
            field="STORE",
        )

    raw_method = (env.get("METHOD") or "").strip().upper() or "POST"
    method = _METHOD_ALIASES.get(raw_method)
    if method is None:
        return ConfigError(
            error=f"METHOD must be PUT or POST (got: {raw_method})",
            field="METHOD",
        )

    return Ok(
        data=EtlConfig(
            source_url=source_url,
            query=query,
            store_url=store_url,
            write_method=method,
        )
    )
