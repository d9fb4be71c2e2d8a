# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console logging for the command line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from tracerisk.common.environment import Environment
from tracerisk.common.tracerisk_logger import TraceRiskLogger

_logger = TraceRiskLogger(__name__)


def setup_rich_logging(level: str | None = None) -> None:
    """Route the root logger to stderr through a RichHandler.

    Existing root handlers are removed so repeated calls do not duplicate output.

    Args:
        level: Log level name. Defaults to ``Environment.LOGGING.LEVEL``.
    """
    level = (level or Environment.LOGGING.LEVEL).upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    rich_handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=Console(stderr=True),
        show_time=True,
        log_time_format="%H:%M:%S.%f",
        omit_repeated_times=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    _logger.debug(lambda: f"Logging initialized with level: {level}")
