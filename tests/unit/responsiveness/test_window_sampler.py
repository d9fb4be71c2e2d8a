# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for window sampling of main thread busy intervals."""

import pytest

from tests.conftest import (
    MAIN_PID,
    MAIN_TID,
    OTHER_TID,
    anchor_event,
    marker_event,
    task_event,
)
from tracerisk.common.exceptions import InvalidWindowError, MissingAnchorEventError
from tracerisk.common.models import MainThread, TraceEvent
from tracerisk.responsiveness.window_sampler import (
    extract,
    find_main_thread,
    resolve_window,
    sort_events,
)


class TestSortEvents:
    def test_sorts_by_timestamp_and_drops_zero_timestamps(self):
        late = task_event(50, 1)
        early = task_event(10, 1)
        sentinel = TraceEvent(pid=1, tid=1, name="thread_name", ts=0)

        result = sort_events([late, sentinel, anchor_event(), early])

        assert [event.ts for event in result] == [
            anchor_event().ts,
            early.ts,
            late.ts,
        ]

    def test_equal_timestamps_keep_recorded_order(self):
        first = task_event(10, 5, tid=MAIN_TID)
        second = task_event(10, 5, tid=OTHER_TID)

        assert sort_events([second, first]) == [second, first]


class TestFindMainThread:
    def test_uses_first_anchor_event(self):
        events = [anchor_event(pid=7, tid=8), anchor_event(pid=9, tid=10)]

        assert find_main_thread(events) == MainThread(pid=7, tid=8)

    def test_missing_anchor_raises(self):
        with pytest.raises(MissingAnchorEventError, match="TracingStartedInPage"):
            find_main_thread([task_event(0, 10), marker_event(100)])


class TestResolveWindow:
    def test_defaults_to_first_and_last_event(self, build_events):
        events = sort_events(build_events([(10, 5)], trace_end_ms=250))

        window = resolve_window(events)

        assert window.start_time == 0.0
        assert window.end_time == pytest.approx(250.0)
        assert window.total_time == pytest.approx(250.0)

    def test_window_may_extend_to_end_of_last_task(self, build_events):
        events = sort_events(build_events([(90, 60)], trace_end_ms=100))

        window = resolve_window(events, 0, 150)

        assert window.end_time == 150.0

    @pytest.mark.parametrize(
        "start_time,end_time",
        [
            (50, 50),
            (60, 40),
            (-1, 50),
            (0, 500),
        ],
        ids=["empty", "inverted", "before-trace", "after-trace"],
    )  # fmt: skip
    def test_invalid_windows_raise(self, build_events, start_time, end_time):
        events = sort_events(build_events([(10, 5)], trace_end_ms=100))

        with pytest.raises(InvalidWindowError) as exc_info:
            resolve_window(events, start_time, end_time)

        assert exc_info.value.start_time == start_time
        assert exc_info.value.end_time == end_time


class TestExtract:
    def test_empty_event_stream_raises(self):
        with pytest.raises(MissingAnchorEventError):
            extract([])

    def test_missing_anchor_raises(self):
        with pytest.raises(MissingAnchorEventError):
            extract([task_event(0, 10), task_event(20, 10), marker_event(100)])

    @pytest.mark.parametrize(
        "events",
        [[], [TraceEvent(pid=MAIN_PID, tid=MAIN_TID, name="thread_name", ts=0)]],
        ids=["empty", "only-zero-timestamps"],
    )  # fmt: skip
    def test_no_timestamped_events_with_explicit_main_thread(self, events):
        with pytest.raises(InvalidWindowError, match="no timestamped events"):
            extract(events, main_thread=MainThread(pid=MAIN_PID, tid=MAIN_TID))

    def test_durations_are_sorted_ascending(self, build_events):
        events = build_events([(10, 30), (50, 5), (70, 12)], trace_end_ms=100)

        sample = extract(events, 0, 100)

        assert sample.durations == pytest.approx([5.0, 12.0, 30.0])
        assert sample.clipped_length == 0.0

    def test_only_main_thread_top_level_tasks_are_sampled(self, build_events):
        events = build_events([(10, 20)], trace_end_ms=100)
        events.append(task_event(40, 15, tid=OTHER_TID))
        events.append(task_event(60, 15, pid=MAIN_PID + 1))
        events.append(task_event(80, 5, name="ParseHTML"))

        sample = extract(events, 0, 100)

        assert sample.durations == pytest.approx([20.0])

    def test_explicit_main_thread_overrides_anchor(self, build_events):
        events = build_events([(10, 20)], trace_end_ms=100)
        events.append(task_event(40, 15, tid=OTHER_TID))

        sample = extract(events, 0, 100, main_thread=MainThread(pid=MAIN_PID, tid=OTHER_TID))

        assert sample.durations == pytest.approx([15.0])

    def test_task_overlapping_window_start_is_clipped(self, build_events):
        events = build_events([(10, 50)], trace_end_ms=200)

        sample = extract(events, 20, 120)

        assert sample.durations == pytest.approx([40.0])
        assert sample.clipped_length == 0.0

    def test_task_overlapping_window_end_keeps_full_length(self, build_events):
        events = build_events([(90, 50)], trace_end_ms=200)

        sample = extract(events, 0, 100)

        assert sample.durations == pytest.approx([50.0])
        assert sample.clipped_length == pytest.approx(40.0)
        assert sample.busy_time == pytest.approx(10.0)

    def test_task_overlapping_both_edges(self, build_events):
        events = build_events([(10, 100)], trace_end_ms=200)

        sample = extract(events, 20, 80)

        assert sample.durations == pytest.approx([90.0])
        assert sample.clipped_length == pytest.approx(30.0)
        assert sample.busy_time == pytest.approx(60.0)

    @pytest.mark.parametrize(
        "task",
        [
            (0, 20),
            (5, 10),
            (80, 10),
            (95, 5),
        ],
        ids=["ends-at-start", "before-start", "starts-at-end", "after-end"],
    )  # fmt: skip
    def test_tasks_outside_window_are_discarded(self, build_events, task):
        events = build_events([task], trace_end_ms=100)

        sample = extract(events, 20, 80)

        assert sample.durations == []
        assert sample.clipped_length == 0.0

    def test_last_end_straddling_task_wins(self, build_events):
        events = build_events([(80, 50), (90, 60)], trace_end_ms=200)

        sample = extract(events, 0, 100)

        assert sample.durations == pytest.approx([50.0, 60.0])
        assert sample.clipped_length == pytest.approx(50.0)

    def test_default_window_ends_at_last_event(self, build_events):
        events = build_events([(10, 20), (90, 30)], trace_end_ms=100)

        sample = extract(events)

        assert sample.window.start_time == 0.0
        assert sample.window.end_time == pytest.approx(100.0)
        assert sample.durations == pytest.approx([20.0, 30.0])
        assert sample.clipped_length == pytest.approx(20.0)

    def test_task_without_duration_is_zero_length(self, build_events):
        events = build_events([], trace_end_ms=100)
        events.append(
            TraceEvent(
                pid=MAIN_PID,
                tid=MAIN_TID,
                name="MessageLoop::RunTask",
                ts=anchor_event().ts + 50_000,
            )
        )

        sample = extract(events, 0, 100)

        assert sample.durations == [0.0]

    def test_no_tasks_yields_empty_sample(self, build_events):
        sample = extract(build_events([], trace_end_ms=100))

        assert sample.durations == []
        assert sample.busy_time == 0.0
