# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict


class TraceRiskBaseModel(BaseModel):
    """Base model for all tracerisk data models.

    Unknown fields are ignored so raw trace records can be validated directly.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
