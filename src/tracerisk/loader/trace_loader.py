# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Decoding of raw trace JSON into trace events.

Two layouts are accepted: an object with a ``traceEvents`` array, and a bare
array of events.
"""

from pathlib import Path

import orjson
from pydantic import ValidationError

from tracerisk.common.exceptions import TraceLoadError
from tracerisk.common.models import Trace
from tracerisk.common.tracerisk_logger import TraceRiskLogger

_logger = TraceRiskLogger(__name__)


def load_trace(data: bytes | str) -> Trace:
    """Decode a JSON trace document.

    Raises:
        TraceLoadError: If the document is not valid JSON or a record is malformed.
    """
    try:
        raw = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise TraceLoadError(f"Trace is not valid JSON: {e}") from e

    if isinstance(raw, list):
        raw = {"traceEvents": raw}
    elif not isinstance(raw, dict) or "traceEvents" not in raw:
        raise TraceLoadError(
            "Trace must be an array of events or an object with a 'traceEvents' array"
        )

    try:
        trace = Trace.model_validate(raw)
    except ValidationError as e:
        raise TraceLoadError(f"Malformed trace event: {e}") from e

    _logger.debug(lambda: f"Loaded trace with {len(trace.trace_events)} events")
    return trace


def load_trace_file(path: Path) -> Trace:
    """Read and decode a JSON trace file."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise TraceLoadError(f"Unable to read trace file {path}: {e}") from e
    return load_trace(data)
