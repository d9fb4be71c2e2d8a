# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings.

Each group of settings is its own ``BaseSettings`` class with a dedicated env
prefix, and all groups hang off the ``Environment`` namespace::

    Environment.LOGGING.LEVEL              # TRACERISK_LOGGING_LEVEL
    Environment.RISK.DEFAULT_PERCENTILES   # TRACERISK_RISK_DEFAULT_PERCENTILES
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tracerisk.common.constants import DEFAULT_RISK_PERCENTILES


class _LoggingSettings(BaseSettings):
    """Console logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="TRACERISK_LOGGING_", case_sensitive=False
    )

    LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level for console output.",
    )

    @field_validator("LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value


class _RiskSettings(BaseSettings):
    """Defaults for the risk-to-responsiveness command line."""

    model_config = SettingsConfigDict(env_prefix="TRACERISK_RISK_", case_sensitive=False)

    DEFAULT_PERCENTILES: list[float] = Field(
        default_factory=lambda: list(DEFAULT_RISK_PERCENTILES),
        description="Percentiles reported when none are requested explicitly.",
    )

    @field_validator("DEFAULT_PERCENTILES")
    @classmethod
    def _check_percentiles(cls, value: list[float]) -> list[float]:
        if not value:
            raise ValueError("At least one default percentile is required")
        for percentile in value:
            if not 0.0 < percentile <= 1.0:
                raise ValueError(f"Percentile {percentile} is outside (0, 1]")
        return sorted(value)


class _Environment:
    """Namespace of all settings groups."""

    def __init__(self) -> None:
        self.LOGGING = _LoggingSettings()
        self.RISK = _RiskSettings()


Environment = _Environment()
