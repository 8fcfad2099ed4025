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

"""Pipeline orchestrator.

Runs the stages strictly in order, each one finishing before the next:
  1. Fetch: content-negotiated GET of the source graph
  2. Ingest: parse the response stream into an in-memory quad store
  3. Query: evaluate the CONSTRUCT/DESCRIBE query over the store
  4. Publish: serialize to Turtle, PUT or POST to the graph store

The first failing stage ends the run in the FAILED state. Nothing is
retried and nothing already sent to the store is rolled back.
"""

from __future__ import annotations

from enum import Enum

from rdf_etl.config import EtlConfig
from rdf_etl.fetcher import fetch_rdf
from rdf_etl.ingestor import ingest
from rdf_etl.logger import PipelineSummary, get_logger
from rdf_etl.publisher import publish
from rdf_etl.result import Fail, Ok, Result
from rdf_etl.sparql.runner import run_query

log = get_logger(__name__)


class PipelineState(str, Enum):
    START = "start"
    CONFIGURED = "configured"
    FETCHED = "fetched"
    INGESTED = "ingested"
    QUERIED = "queried"
    PUBLISHED = "published"
    DONE = "done"
    FAILED = "failed"


def _fail(summary: PipelineSummary, stage: str, result: Fail) -> Fail:
    summary.counter(stage).failed = True
    summary.state = PipelineState.FAILED.value
    log.info(summary.report())
    return result


def run_pipeline(config: EtlConfig) -> Result[PipelineSummary]:
    """Run fetch → ingest → query → publish for one resolved config."""
    summary = PipelineSummary(state=PipelineState.CONFIGURED.value)

    # 1. Fetch
    log.info("[1/3] Fetching RDF from: %s", config.source_url)
    fetch_result = fetch_rdf(config.source_url)
    if not fetch_result.ok:
        return _fail(summary, "fetch", fetch_result)
    summary.counter("fetch").detail = fetch_result.data.content_type
    summary.state = PipelineState.FETCHED.value

    # 2. Ingest (response stream is closed once the parser is done with it)
    content = fetch_result.data
    try:
        ingest_result = ingest(content.body, content.content_type, content.url)
    finally:
        content.close()
    if not ingest_result.ok:
        return _fail(summary, "ingest", ingest_result)

    store = ingest_result.data
    loaded = len(store)
    summary.counter("ingest").quads = loaded
    summary.state = PipelineState.INGESTED.value
    log.info("[1/3] Loaded quads: %d", loaded)

    # 3. Query
    log.info("[2/3] Evaluating SPARQL query...")
    query_result = run_query(config.query, store)
    if not query_result.ok:
        return _fail(summary, "query", query_result)

    quads = query_result.data
    summary.counter("query").quads = len(quads)
    summary.state = PipelineState.QUERIED.value
    log.info("[2/3] Result quads: %d", len(quads))

    # 4. Publish
    method = config.write_method
    log.info(
        "[3/3] Writing results to store: %s (METHOD=%s)",
        config.store_url,
        method.value,
    )
    publish_result = publish(quads, config.store_url, method)
    if not publish_result.ok:
        return _fail(summary, "publish", publish_result)

    summary.counter("publish").quads = len(quads)
    summary.state = PipelineState.PUBLISHED.value
    log.info("[3/3] Done.")

    summary.state = PipelineState.DONE.value
    log.info(summary.report())
    return Ok(data=summary)
