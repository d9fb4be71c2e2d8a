# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from tracerisk.responsiveness.log_normal import (
    complementary_score,
    fit,
    score,
)
from tracerisk.responsiveness.risk_percentiles import (
    compute_risk_percentiles,
)
from tracerisk.responsiveness.trace_processor import (
    get_risk_to_responsiveness,
)
from tracerisk.responsiveness.window_sampler import (
    extract,
    find_main_thread,
    resolve_window,
    sort_events,
)

__all__ = [
    "complementary_score",
    "compute_risk_percentiles",
    "extract",
    "find_main_thread",
    "fit",
    "get_risk_to_responsiveness",
    "resolve_window",
    "score",
    "sort_events",
]
