# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for tracerisk."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text.
################################################################################

from pathlib import Path

from cyclopts import App

from tracerisk.cli_utils import exit_on_error

app = App(name="tracerisk", help="Main thread responsiveness risk and metric scoring")


@app.command(name="risk")
def risk(
    trace_file: Path,
    start_time: float | None = None,
    end_time: float | None = None,
    percentiles: list[float] | None = None,
    log_level: str | None = None,
) -> None:
    """Estimate input latency percentiles from a recorded trace.

    Args:
        trace_file: Path to a JSON trace.
        start_time: Start (ms) of the range of interest. Defaults to trace start.
        end_time: End (ms) of the range of interest. Defaults to the last event.
        percentiles: Percentiles in (0, 1]. Defaults to TRACERISK_RISK_DEFAULT_PERCENTILES.
        log_level: Console log level. Defaults to TRACERISK_LOGGING_LEVEL.
    """
    with exit_on_error(title="Error Computing Risk To Responsiveness"):
        from tracerisk.cli_commands.risk import run_risk
        from tracerisk.common.logging import setup_rich_logging

        setup_rich_logging(log_level)
        run_risk(trace_file, start_time, end_time, percentiles)


@app.command(name="score")
def score(
    value: float,
    *,
    median: float,
    falloff: float,
    lower_is_better: bool = False,
) -> None:
    """Score a raw metric value against a log-normal curve.

    Args:
        value: The raw metric value, e.g. a duration in ms.
        median: Value that scores 0.5.
        falloff: Reference point above the median where the curve flattens.
        lower_is_better: Report 1 - CDF instead of the CDF.
    """
    with exit_on_error(title="Error Scoring Metric"):
        from tracerisk.cli_commands.score import run_score

        run_score(value, median, falloff, lower_is_better=lower_is_better)
