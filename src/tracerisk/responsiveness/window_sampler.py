# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Window sampling of main thread busy intervals.

Turns a raw event stream into the sorted sample of top-level task durations
that intersect a time window. Tasks starting before the window are clipped to
the window start. A task running past the window end keeps its (front-clipped)
length in the sample and the part past the end is reported separately as the
``clipped_length``.

Only one ``clipped_length`` is kept. If several tasks straddle the window end,
the last one in timestamp order wins. On a single-threaded main thread at most
one task can be running at the window end, so this only matters for malformed
traces with overlapping top-level tasks.
"""

from collections.abc import Iterable
from operator import attrgetter

import numpy as np

from tracerisk.common.constants import (
    MICROS_PER_MILLI,
    TOP_LEVEL_TASK_EVENT_NAME,
    TRACING_STARTED_EVENT_NAME,
)
from tracerisk.common.exceptions import InvalidWindowError, MissingAnchorEventError
from tracerisk.common.models import DurationSample, MainThread, TimeWindow, TraceEvent
from tracerisk.common.tracerisk_logger import TraceRiskLogger

_logger = TraceRiskLogger(__name__)


def sort_events(events: Iterable[TraceEvent]) -> list[TraceEvent]:
    """Sort events by timestamp, dropping the ``ts == 0`` sentinel events.

    The sort is stable, so events sharing a timestamp keep their recorded order.
    """
    return sorted((event for event in events if event.ts != 0), key=attrgetter("ts"))


def find_main_thread(events: Iterable[TraceEvent]) -> MainThread:
    """Identify the main thread from the first tracing-started marker event.

    Raises:
        MissingAnchorEventError: If no marker event is present.
    """
    for event in events:
        if event.name == TRACING_STARTED_EVENT_NAME:
            return MainThread(pid=event.pid, tid=event.tid)
    raise MissingAnchorEventError(TRACING_STARTED_EVENT_NAME)


def resolve_window(
    events: list[TraceEvent],
    start_time: float | None = None,
    end_time: float | None = None,
) -> TimeWindow:
    """Resolve the sampling window for a sorted, non-empty event list.

    Unset bounds default to the first and last event timestamps. Bounds are
    validated against the span of the trace, which runs from the first event's
    timestamp to the latest end of any event.

    Raises:
        InvalidWindowError: If the window is empty, inverted, or outside the trace.
    """
    ts_base = events[0].ts
    last_ts = (events[-1].ts - ts_base) / MICROS_PER_MILLI
    span_end = max(
        (event.ts + (event.dur or 0.0) - ts_base) / MICROS_PER_MILLI for event in events
    )

    start_time = 0.0 if start_time is None else float(start_time)
    end_time = last_ts if end_time is None else float(end_time)

    if not start_time < end_time:
        raise InvalidWindowError(
            "Window start must be before window end", start_time, end_time
        )
    if start_time < 0 or end_time > span_end:
        raise InvalidWindowError(
            f"Window lies outside the trace span [0, {span_end}]", start_time, end_time
        )
    return TimeWindow(start_time=start_time, end_time=end_time)


def extract(
    events: Iterable[TraceEvent],
    window_start: float | None = None,
    window_end: float | None = None,
    main_thread: MainThread | None = None,
) -> DurationSample:
    """Extract the main thread busy intervals lying inside a window.

    Args:
        events: Trace events in any order.
        window_start: Window start in ms relative to the first event. Defaults to 0.
        window_end: Window end in ms relative to the first event. Defaults to the
            last event's relative timestamp.
        main_thread: Thread whose top-level tasks are sampled. Defaults to the
            thread of the tracing-started marker event.

    Returns:
        The ascending duration sample, its clipped length and the resolved window.

    Raises:
        MissingAnchorEventError: If the main thread cannot be identified.
        InvalidWindowError: If the window is invalid for this trace, or the trace has
            no timestamped events to window.
    """
    ordered = sort_events(events)
    if not ordered:
        if main_thread is None:
            raise MissingAnchorEventError(TRACING_STARTED_EVENT_NAME)
        raise InvalidWindowError(
            "Trace has no timestamped events",
            float(window_start or 0.0),
            float(window_end or 0.0),
        )
    if main_thread is None:
        main_thread = find_main_thread(ordered)

    window = resolve_window(ordered, window_start, window_end)
    ts_base = ordered[0].ts

    tasks = [
        event
        for event in ordered
        if event.name == TOP_LEVEL_TASK_EVENT_NAME and main_thread.owns(event)
    ]
    _logger.debug(
        lambda: f"Sampling {len(tasks)} top-level tasks on pid={main_thread.pid} "
        f"tid={main_thread.tid} in window [{window.start_time}, {window.end_time}]"
    )
    if not tasks:
        return DurationSample(window=window)

    starts = np.fromiter((event.ts for event in tasks), dtype=np.float64, count=len(tasks))
    starts = (starts - ts_base) / MICROS_PER_MILLI
    lengths = np.fromiter(
        (event.dur or 0.0 for event in tasks), dtype=np.float64, count=len(tasks)
    )
    lengths /= MICROS_PER_MILLI
    ends = starts + lengths

    overlapping = (ends > window.start_time) & (starts < window.end_time)
    starts, lengths, ends = starts[overlapping], lengths[overlapping], ends[overlapping]

    front_clipped = starts < window.start_time
    adjusted_starts = np.where(front_clipped, window.start_time, starts)
    durations = np.where(front_clipped, ends - window.start_time, lengths)

    clipped_length = 0.0
    end_clipped = np.flatnonzero(ends > window.end_time)
    if end_clipped.size:
        if end_clipped.size > 1:
            _logger.debug(
                lambda: f"{end_clipped.size} tasks straddle the window end; "
                "keeping the clipped length of the last one"
            )
        last = end_clipped[-1]
        clipped_length = max(
            0.0, float(durations[last] - (window.end_time - adjusted_starts[last]))
        )

    _logger.trace(
        lambda: f"Sampled {durations.size} durations, clipped_length={clipped_length}"
    )
    return DurationSample(
        durations=np.sort(durations, kind="stable").tolist(),
        clipped_length=clipped_length,
        window=window,
    )
