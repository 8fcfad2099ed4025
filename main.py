# SPDX-License-Identifier: MIT
"""
█████╗ ██████╗  █████╗ ███████╗
██╔══██╗██╔══██╗██╔══██╗██╔════╝
███████║██████╔╝███████║███████╗
██╔══██║██╔══██╗██╔══██║╚════██║
██║  ██║██║  ██║██║  ██║███████║
╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>

Licensed under the MIT License.
See LICENSE and THIRD_PARTY_LICENSES for details.

RDF ETL Worker

Fetches an RDF graph from URL, evaluates a SPARQL CONSTRUCT/DESCRIBE
query over it in memory, and writes the resulting graph as Turtle to
a graph store.

Pipeline: Fetch -> Ingest -> Query -> Publish

Environment:
    URL     source graph IRI (required)
    Query   SPARQL query text (required)
    STORE   destination graph store IRI (required)
    METHOD  PUT (replace) or POST (append), default POST

Usage: python main.py [--env-file=.env]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rdf_etl.config import load_env_file, resolve_config
from rdf_etl.logger import get_logger
from rdf_etl.pipeline import run_pipeline

log = get_logger("main")


def _run(env_file: Path | None) -> int:
    load_env_file(env_file)

    cfg_result = resolve_config()
    if not cfg_result.ok:
        log.error("ERROR: %s", cfg_result.error)
        return 1

    result = run_pipeline(cfg_result.data)
    if not result.ok:
        log.error("ERROR: %s", result.error)
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rdf-etl",
        description="Fetch RDF → SPARQL CONSTRUCT → write Turtle to a graph store",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="dotenv file to load before reading the environment (default: ./.env if present)",
    )
    args = parser.parse_args(argv)

    if args.env_file is not None and not args.env_file.exists():
        log.error("ERROR: env file not found: %s", args.env_file)
        return 1

    try:
        return _run(args.env_file)
    except Exception as exc:
        log.exception("ERROR: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
