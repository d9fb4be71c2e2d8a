# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Models for the raw trace event stream and the thread it is attributed to."""

from typing import Any

from pydantic import ConfigDict, Field

from tracerisk.common.models.base_models import TraceRiskBaseModel


class TraceEvent(TraceRiskBaseModel):
    """A single trace event record.

    Timestamps and durations are in microseconds on the trace's monotonic clock.
    """

    model_config = ConfigDict(frozen=True)

    pid: int = Field(..., description="Id of the process that emitted the event.")
    tid: int = Field(..., description="Id of the thread that emitted the event.")
    name: str = Field(..., description="Event name, e.g. 'MessageLoop::RunTask'.")
    ts: float = Field(..., description="Timestamp in microseconds.")
    dur: float | None = Field(
        default=None,
        ge=0,
        description="Duration in microseconds, for complete events.",
    )
    ph: str | None = Field(default=None, description="Event phase.")
    cat: str | None = Field(default=None, description="Comma separated categories.")
    args: dict[str, Any] = Field(
        default_factory=dict, description="Free-form event arguments."
    )


class Trace(TraceRiskBaseModel):
    """A recorded trace: the collection of its events, in any order."""

    trace_events: list[TraceEvent] = Field(
        default_factory=list,
        alias="traceEvents",
        description="The events of the trace, not necessarily sorted.",
    )


class MainThread(TraceRiskBaseModel):
    """The process/thread pair that hosts the page's main thread."""

    model_config = ConfigDict(frozen=True)

    pid: int
    tid: int

    def owns(self, event: TraceEvent) -> bool:
        """Whether the event was emitted on this thread."""
        return event.pid == self.pid and event.tid == self.tid
