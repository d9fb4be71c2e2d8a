# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Models produced by the responsiveness computations."""

import math

from pydantic import ConfigDict, Field, computed_field

from tracerisk.common.exceptions import InvalidMetricValueError
from tracerisk.common.models.base_models import TraceRiskBaseModel

_SQRT_2 = math.sqrt(2.0)


class TimeWindow(TraceRiskBaseModel):
    """A sampling window in milliseconds relative to the first trace event."""

    model_config = ConfigDict(frozen=True)

    start_time: float = Field(..., description="Window start (ms).")
    end_time: float = Field(..., description="Window end (ms).")

    @computed_field
    @property
    def total_time(self) -> float:
        """Length of the window in milliseconds."""
        return self.end_time - self.start_time


class DurationSample(TraceRiskBaseModel):
    """Busy-interval durations that intersect a window.

    Each duration is already clipped so it does not extend before the window
    start. A task straddling the window end keeps its full length in
    durations; the portion past the end is carried by clipped_length.
    """

    model_config = ConfigDict(frozen=True)

    durations: list[float] = Field(
        default_factory=list, description="Durations in ms, sorted ascending."
    )
    clipped_length: float = Field(
        default=0.0,
        ge=0,
        description="Portion (ms) of the end-straddling task that lies past the window end.",
    )
    window: TimeWindow

    @property
    def busy_time(self) -> float:
        """Main thread busy time (ms) inside the window."""
        return sum(self.durations) - self.clipped_length


class RiskPercentile(TraceRiskBaseModel):
    """Expected input latency at a given percentile of arrival times."""

    model_config = ConfigDict(frozen=True)

    percentile: float = Field(..., gt=0, le=1, description="Percentile in (0, 1].")
    latency_ms: float = Field(
        ..., description="Expected input latency (ms), including the base latency."
    )


class LogNormalParameters(TraceRiskBaseModel):
    """Location and shape of a log-normal distribution."""

    model_config = ConfigDict(frozen=True)

    location: float = Field(..., description="Mean of the underlying normal (ln of the median).")
    shape: float = Field(..., gt=0, description="Standard deviation of the underlying normal.")

    def _standardize(self, value: float) -> float:
        if math.isnan(value):
            raise InvalidMetricValueError("Cannot score a NaN value", value)
        return (math.log(value) - self.location) / self.shape

    def cdf(self, value: float) -> float:
        """Evaluate the CDF at ``value``; 0 for non-positive values."""
        if value <= 0:
            return 0.0
        return 0.5 * (1.0 + math.erf(self._standardize(value) / _SQRT_2))

    def complementary_cdf(self, value: float) -> float:
        """Evaluate ``1 - CDF`` at ``value``; 1 for non-positive values."""
        if value <= 0:
            return 1.0
        return 0.5 * math.erfc(self._standardize(value) / _SQRT_2)
