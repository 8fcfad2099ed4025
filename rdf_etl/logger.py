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

"""Structured logger with per-stage records and final summary.

Tracks how far a run got and how many quads each stage handled so the
entry point can print a CI-friendly summary at the end.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class StageCounter:
    """Quad count and outcome for a single pipeline stage."""

    name: str
    quads: int = 0
    failed: bool = False
    detail: str = ""


@dataclass
class PipelineSummary:
    """Accumulates stage records and the state the run reached."""

    state: str = "start"
    stages: dict[str, StageCounter] = field(default_factory=dict)

    def counter(self, name: str) -> StageCounter:
        """Get or create the record for a named stage."""
        if name not in self.stages:
            self.stages[name] = StageCounter(name=name)
        return self.stages[name]

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Pipeline Summary", "=" * 40]
        for stage in self.stages.values():
            parts = [f"{stage.name}: {'failed' if stage.failed else 'ok'}"]
            if stage.quads:
                parts.append(f"{stage.quads} quads")
            if stage.detail:
                parts.append(stage.detail)
            lines.append("  ".join(parts))
        lines.append(f"state: {self.state}")
        lines.append("=" * 40)
        return "\n".join(lines)
