# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""End-to-end risk-to-responsiveness computation for a trace."""

from collections.abc import Iterable, Sequence

from tracerisk.common.constants import DEFAULT_RISK_PERCENTILES
from tracerisk.common.models import RiskPercentile, Trace, TraceEvent
from tracerisk.responsiveness.risk_percentiles import compute_risk_percentiles
from tracerisk.responsiveness.window_sampler import extract


def get_risk_to_responsiveness(
    trace: Trace | Iterable[TraceEvent],
    start_time: float | None = None,
    end_time: float | None = None,
    percentiles: Sequence[float] | None = None,
) -> list[RiskPercentile]:
    """Calculate the expected input latency of the main thread at selected percentiles.

    Args:
        trace: The trace, or its events in any order.
        start_time: Start (ms) of the range of interest. Defaults to trace start.
        end_time: End (ms) of the range of interest. Defaults to the last event.
        percentiles: Percentiles to compute, in any order. Defaults to
            [0.5, 0.75, 0.9, 0.99, 1].

    Returns:
        One result per percentile, ordered by ascending percentile.
    """
    events = trace.trace_events if isinstance(trace, Trace) else trace
    percentiles = (
        sorted(percentiles)
        if percentiles is not None
        else list(DEFAULT_RISK_PERCENTILES)
    )

    sample = extract(events, start_time, end_time)
    return compute_risk_percentiles(
        sample.durations,
        sample.window.total_time,
        percentiles,
        sample.clipped_length,
    )
