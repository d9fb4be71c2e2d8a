# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from tracerisk.cli_commands.risk import (
    run_risk,
)
from tracerisk.cli_commands.score import (
    run_score,
)

__all__ = [
    "run_risk",
    "run_score",
]
