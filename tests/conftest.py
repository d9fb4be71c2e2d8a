# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared trace-building fixtures.

All helpers take times in milliseconds relative to the first event of the
trace, which is always the tracing-started marker at ``TS_BASE_US``.
"""

import pytest

from tracerisk.common.constants import (
    TOP_LEVEL_TASK_EVENT_NAME,
    TRACING_STARTED_EVENT_NAME,
)
from tracerisk.common.models import TraceEvent

MAIN_PID = 1
MAIN_TID = 259
OTHER_TID = 300
TS_BASE_US = 1_000_000


def ms_to_ts(ms: float) -> float:
    return TS_BASE_US + ms * 1000


def anchor_event(pid: int = MAIN_PID, tid: int = MAIN_TID) -> TraceEvent:
    return TraceEvent(
        pid=pid,
        tid=tid,
        name=TRACING_STARTED_EVENT_NAME,
        ts=TS_BASE_US,
        ph="I",
        args={"data": {"page": "0x1"}},
    )


def task_event(
    start_ms: float,
    dur_ms: float,
    pid: int = MAIN_PID,
    tid: int = MAIN_TID,
    name: str = TOP_LEVEL_TASK_EVENT_NAME,
) -> TraceEvent:
    return TraceEvent(
        pid=pid, tid=tid, name=name, ts=ms_to_ts(start_ms), dur=dur_ms * 1000, ph="X"
    )


def marker_event(at_ms: float) -> TraceEvent:
    """An instant event on another thread, used to extend the trace span."""
    return TraceEvent(
        pid=MAIN_PID, tid=OTHER_TID, name="Marker", ts=ms_to_ts(at_ms), ph="I"
    )


@pytest.fixture
def build_events():
    """Build an event list: anchor, main thread tasks, and an end marker."""

    def _build(
        tasks: list[tuple[float, float]], trace_end_ms: float
    ) -> list[TraceEvent]:
        events = [anchor_event()]
        events.extend(task_event(start, dur) for start, dur in tasks)
        events.append(marker_event(trace_end_ms))
        return events

    return _build


@pytest.fixture
def raw_trace_dict() -> dict:
    """A small raw trace in the object layout, as decoded from JSON."""
    return {
        "traceEvents": [
            {"pid": 1, "tid": 259, "ph": "X", "name": "MessageLoop::RunTask",
             "ts": TS_BASE_US + 20_000, "dur": 30_000, "cat": "toplevel", "args": {}},
            {"pid": 1, "tid": 259, "ph": "I", "name": "TracingStartedInPage",
             "ts": TS_BASE_US, "args": {"data": {"page": "0x1"}}},
            {"pid": 1, "tid": 300, "ph": "I", "name": "Marker", "ts": TS_BASE_US + 100_000},
            {"pid": 1, "tid": 259, "ph": "M", "name": "thread_name", "ts": 0,
             "args": {"name": "CrRendererMain"}},
        ],
        "metadata": {"source": "test"},
    }  # fmt: skip
