# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CLI command for risk-to-responsiveness percentiles of a trace."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from tracerisk.common.environment import Environment
from tracerisk.loader import load_trace_file
from tracerisk.responsiveness import get_risk_to_responsiveness

if TYPE_CHECKING:
    from tracerisk.common.models import RiskPercentile


def _build_risk_table(results: list[RiskPercentile]) -> Table:
    table = Table(title="Risk To Responsiveness")
    table.add_column("Percentile", justify="right", style="cyan", no_wrap=True)
    table.add_column("Latency (ms)", justify="right", style="green", no_wrap=True)
    for result in results:
        table.add_row(f"{result.percentile * 100:g}%", f"{result.latency_ms:,.2f}")
    return table


def run_risk(
    trace_file: Path,
    start_time: float | None = None,
    end_time: float | None = None,
    percentiles: list[float] | None = None,
) -> list[RiskPercentile]:
    """Load a trace, compute its risk percentiles and print them as a table."""
    trace = load_trace_file(trace_file)
    results = get_risk_to_responsiveness(
        trace,
        start_time=start_time,
        end_time=end_time,
        percentiles=percentiles or Environment.RISK.DEFAULT_PERCENTILES,
    )

    console = Console(width=120)
    console.print()
    console.print(f"[bold]Trace:[/bold] {trace_file}")
    console.print(_build_risk_table(results))
    return results
