# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel

from tracerisk.common.exceptions import TraceRiskError


@contextmanager
def exit_on_error(title: str = "Error") -> Iterator[None]:
    """Print tracerisk errors as a rich panel on stderr and exit with status 1."""
    try:
        yield
    except TraceRiskError as e:
        console = Console(stderr=True)
        console.print(
            Panel(
                str(e),
                title=f"{title}: {type(e).__name__}",
                title_align="left",
                border_style="red",
            )
        )
        sys.exit(1)
