# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger wrapper with a TRACE level and lazily evaluated messages.

Messages may be passed as plain strings or as zero-argument callables. Callables
are only invoked when the level is enabled, so expensive f-strings in hot paths
cost nothing when debug logging is off::

    _logger = TraceRiskLogger(__name__)
    _logger.debug(lambda: f"Sampled {len(durations)} durations")
"""

from __future__ import annotations

import logging
from collections.abc import Callable

_TRACE = logging.DEBUG - 5
_DEBUG = logging.DEBUG

logging.addLevelName(_TRACE, "TRACE")


class TraceRiskLogger:
    """Thin wrapper over :class:`logging.Logger` adding TRACE and lazy messages."""

    def __init__(self, logger_name: str | None = None) -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(_TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(_DEBUG)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def log(
        self, level: int, message: str | Callable[..., str], *args, **kwargs
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        # stacklevel=3 attributes the record to the caller of the level method
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, **kwargs)

    def trace(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_TRACE, message, *args, **kwargs)

    def debug(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_DEBUG, message, *args, **kwargs)

    def info(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, message, *args, **kwargs)
