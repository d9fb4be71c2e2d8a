# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from tracerisk.common.models.base_models import (
    TraceRiskBaseModel,
)
from tracerisk.common.models.risk_models import (
    DurationSample,
    LogNormalParameters,
    RiskPercentile,
    TimeWindow,
)
from tracerisk.common.models.trace_models import (
    MainThread,
    Trace,
    TraceEvent,
)

__all__ = [
    "DurationSample",
    "LogNormalParameters",
    "MainThread",
    "RiskPercentile",
    "TimeWindow",
    "Trace",
    "TraceEvent",
    "TraceRiskBaseModel",
]
