# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Constants shared by the responsiveness computations."""

BASE_RESPONSE_LATENCY_MS = 16.0
"""The ideal input response latency: one animation frame between the input task and the first frame of the response."""

DEFAULT_RISK_PERCENTILES = (0.5, 0.75, 0.9, 0.99, 1.0)

TRACING_STARTED_EVENT_NAME = "TracingStartedInPage"
"""Marker event whose pid/tid identify the main thread of the page."""

TOP_LEVEL_TASK_EVENT_NAME = "MessageLoop::RunTask"

MICROS_PER_MILLI = 1000.0
