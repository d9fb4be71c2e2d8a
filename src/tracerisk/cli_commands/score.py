# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CLI command for log-normal scoring of a metric value."""

from rich.console import Console

from tracerisk.responsiveness import complementary_score, fit, score


def run_score(
    value: float, median: float, falloff: float, lower_is_better: bool = False
) -> float:
    """Fit the curve, score the value and print the result."""
    params = fit(median, falloff)
    result = complementary_score(params, value) if lower_is_better else score(params, value)

    console = Console(width=120)
    console.print(
        f"location={params.location:.4f} shape={params.shape:.4f} "
        f"[bold]score={result:.4f}[/bold]"
    )
    return result
