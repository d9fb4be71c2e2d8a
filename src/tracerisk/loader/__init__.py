# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from tracerisk.loader.trace_loader import (
    load_trace,
    load_trace_file,
)

__all__ = [
    "load_trace",
    "load_trace_file",
]
