# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Log-normal scoring of raw metric values.

A distribution is specified by its median, where the score is 0.5, and its
falloff, a reference point above the median whose log-distance from it sets
the spread of the curve. The resulting curve is the mirror image, about the
median in log space, of one whose CDF third derivative has its smaller
positive root at the same log-distance below the median. Both values use the
metric's units, e.g. milliseconds.

The shape is derived in closed form from the log-distance between the two::

    log_ratio = ln(median / falloff)
    shape = 0.5 * sqrt(1 - 3 * log_ratio - sqrt((log_ratio - 3)^2 - 8))
"""

import math

from tracerisk.common.exceptions import InvalidDistributionParametersError
from tracerisk.common.models import LogNormalParameters


def fit(median: float, falloff: float) -> LogNormalParameters:
    """Derive log-normal location and shape from a median and a falloff value.

    Raises:
        InvalidDistributionParametersError: If either value is non-positive or
            non-finite, if ``falloff <= median``, or if the pair yields a
            negative radicand.
    """
    if not (math.isfinite(median) and math.isfinite(falloff)):
        raise InvalidDistributionParametersError(
            "Median and falloff must be finite", median, falloff
        )
    if median <= 0 or falloff <= 0:
        raise InvalidDistributionParametersError(
            "Median and falloff must be positive", median, falloff
        )
    if falloff <= median:
        raise InvalidDistributionParametersError(
            "Falloff must be greater than the median", median, falloff
        )

    location = math.log(median)
    log_ratio = math.log(median / falloff)

    inner_radicand = (log_ratio - 3) * (log_ratio - 3) - 8
    if inner_radicand < 0:
        raise InvalidDistributionParametersError(
            f"Negative inner radicand {inner_radicand}", median, falloff
        )
    outer_radicand = 1 - 3 * log_ratio - math.sqrt(inner_radicand)
    if outer_radicand <= 0:
        raise InvalidDistributionParametersError(
            f"Non-positive outer radicand {outer_radicand}", median, falloff
        )

    return LogNormalParameters(location=location, shape=0.5 * math.sqrt(outer_radicand))


def score(params: LogNormalParameters, value: float) -> float:
    """Evaluate the log-normal CDF at ``value``; 0 for non-positive values.

    Raises:
        InvalidMetricValueError: If ``value`` is NaN.
    """
    return params.cdf(value)


def complementary_score(params: LogNormalParameters, value: float) -> float:
    """Evaluate ``1 - CDF`` at ``value``, the score of lower-is-better metrics."""
    return params.complementary_cdf(value)
