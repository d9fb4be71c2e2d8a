# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Risk-to-responsiveness percentiles.

An input is assumed to arrive at a uniformly random instant of the window. If
it lands in idle time it is handled right away; if it lands inside a busy
interval it waits for the rest of that interval. The expected wait therefore
has a piecewise-linear CDF: idle time contributes a jump at zero, and every
busy interval of length ``d`` contributes mass up to ``d``.

Walking the durations from smallest to largest, the CDF value (scaled by the
window length) at the end of the current interval is::

    cdf_time = completed_time + |duration| * remaining_count

where ``completed_time`` is the idle time plus every interval already passed,
and ``remaining_count`` is how many intervals are still long enough to cover
the current wait. Inverting that line at ``percentile * total_time`` gives the
wait, to which one frame of base latency is added.

A task straddling the window end only contributes its in-window part. It is
modelled as a negative pseudo-interval of size ``clipped_length`` merged into
the walk at its sorted position: passing it subtracts the clipped time again
and gives one unit of ``remaining_count`` back.
"""

import math
from collections.abc import Sequence

from tracerisk.common.constants import BASE_RESPONSE_LATENCY_MS
from tracerisk.common.exceptions import (
    DegenerateQuantileError,
    InvalidPercentilesError,
    InvalidWindowError,
)
from tracerisk.common.models import RiskPercentile
from tracerisk.common.tracerisk_logger import TraceRiskLogger

_logger = TraceRiskLogger(__name__)


class _QuantileWalk:
    """Cursor over the sorted durations merged with the clipped pseudo-interval.

    Two sources feed the walk: the real durations, in ascending order, and at
    most one negative pseudo-interval of size ``clipped_length``. The
    pseudo-interval is taken as soon as it is shorter than the next real one.
    """

    def __init__(
        self, durations: Sequence[float], total_time: float, clipped_length: float
    ) -> None:
        self._durations = durations
        self._next_index = 0
        self._pending_clip = clipped_length
        self._current = 0.0

        busy_time = sum(durations) - clipped_length
        # Idle time is already complete before any interval is walked.
        self.completed_time = total_time - busy_time
        self.cdf_time = self.completed_time
        # A clipped task has not started within the count yet.
        self.remaining_count = len(durations) + (0 if clipped_length > 0 else 1)

    @property
    def exhausted(self) -> bool:
        return self._next_index >= len(self._durations)

    def _take_next(self) -> float:
        """Pop the next interval; the clipped pseudo-interval is negative."""
        next_duration = self._durations[self._next_index]
        if 0 < self._pending_clip < next_duration:
            clip, self._pending_clip = self._pending_clip, 0.0
            return -clip
        self._next_index += 1
        return next_duration

    def step(self) -> None:
        """Complete the current interval and move on to the next one."""
        self.completed_time += self._current
        self.remaining_count += 1 if self._current < 0 else -1
        self._current = self._take_next()
        self.cdf_time = self.completed_time + abs(self._current) * self.remaining_count

    def advance_to(self, target_time: float) -> None:
        """Step until the CDF reaches ``target_time`` or the durations run out."""
        while self.cdf_time < target_time and not self.exhausted:
            self.step()

    def latency_at(self, target_time: float) -> float:
        if self.remaining_count == 0:
            raise DegenerateQuantileError(
                f"No remaining probability mass at target time {target_time}; "
                "durations and clipped length are inconsistent"
            )
        # Targets within idle time wait 0ms by definition.
        wait = max(0.0, (target_time - self.completed_time) / self.remaining_count)
        return wait + BASE_RESPONSE_LATENCY_MS


def _validate_inputs(
    durations: Sequence[float],
    total_time: float,
    percentiles: Sequence[float],
    clipped_length: float,
) -> None:
    if not math.isfinite(total_time) or total_time <= 0:
        raise InvalidWindowError(
            "Total window time must be positive and finite", 0.0, float(total_time)
        )
    if clipped_length < 0:
        raise ValueError(f"clipped_length must be non-negative, got {clipped_length}")
    if any(later < earlier for earlier, later in zip(durations, durations[1:])):
        raise ValueError("durations must be sorted in ascending order")

    previous = 0.0
    for percentile in percentiles:
        if not 0.0 < percentile <= 1.0:
            raise InvalidPercentilesError(f"Percentile {percentile} is outside (0, 1]")
        if percentile < previous:
            raise InvalidPercentilesError(
                f"Percentiles must be ascending, got {list(percentiles)}"
            )
        previous = percentile


def compute_risk_percentiles(
    durations: Sequence[float],
    total_time: float,
    percentiles: Sequence[float],
    clipped_length: float = 0.0,
) -> list[RiskPercentile]:
    """Calculate the expected input latency at each requested percentile.

    If one of the durations overlaps the end of the window, its full length
    belongs in ``durations`` and the part outside the window is given as
    ``clipped_length``. For instance, a 50ms task starting 10ms before the end
    of the window appears as ``50`` with ``clipped_length=40``.

    Args:
        durations: Busy interval durations in ms, sorted ascending.
        total_time: Length of the window in ms.
        percentiles: Percentiles of interest in (0, 1], ascending.
        clipped_length: Length (ms) clipped from a duration overlapping the
            window end.

    Returns:
        One result per requested percentile, in the requested order.

    Raises:
        InvalidWindowError: If ``total_time`` is not positive and finite.
        InvalidPercentilesError: If a percentile is outside (0, 1] or out of order.
        DegenerateQuantileError: If the walk runs out of probability mass.
    """
    _validate_inputs(durations, total_time, percentiles, clipped_length)

    walk = _QuantileWalk(durations, total_time, clipped_length)
    results = []
    for percentile in percentiles:
        target_time = percentile * total_time
        walk.advance_to(target_time)
        results.append(
            RiskPercentile(
                percentile=percentile, latency_ms=walk.latency_at(target_time)
            )
        )

    _logger.debug(
        lambda: f"Risk percentiles over {len(durations)} durations in {total_time}ms: "
        + ", ".join(f"p{r.percentile * 100:g}={r.latency_ms:.2f}ms" for r in results)
    )
    return results
