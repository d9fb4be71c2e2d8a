# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class TraceRiskError(Exception):
    """Base class for all exceptions raised by tracerisk."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class MissingAnchorEventError(TraceRiskError):
    """Raised when the main thread cannot be identified because the anchor event is absent."""

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        super().__init__(
            f"No '{event_name}' event found in trace; cannot identify the main thread"
        )


class InvalidWindowError(TraceRiskError, ValueError):
    """Raised when a sampling window is empty, inverted, or outside the trace."""

    def __init__(self, message: str, start_time: float, end_time: float) -> None:
        self.start_time = start_time
        self.end_time = end_time
        super().__init__(f"{message} (start_time={start_time}, end_time={end_time})")


class InvalidPercentilesError(TraceRiskError, ValueError):
    """Raised when requested percentiles are outside (0, 1] or not ascending."""


class InvalidDistributionParametersError(TraceRiskError, ValueError):
    """Raised when a median/falloff pair cannot parameterize a log-normal distribution."""

    def __init__(self, message: str, median: float, falloff: float) -> None:
        self.median = median
        self.falloff = falloff
        super().__init__(f"{message} (median={median}, falloff={falloff})")


class InvalidMetricValueError(TraceRiskError, ValueError):
    """Raised when a metric value cannot be scored against a distribution."""

    def __init__(self, message: str, value: float) -> None:
        self.value = value
        super().__init__(f"{message} (value={value})")


class DegenerateQuantileError(TraceRiskError, ZeroDivisionError):
    """Raised when the quantile walk has no remaining probability mass to divide by."""


class TraceLoadError(TraceRiskError):
    """Raised when raw trace data cannot be decoded into trace events."""
