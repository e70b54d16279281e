"""Shared year-by-year projection contracts."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProjectionPoint(BaseModel):
    """Single year of a projection."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    period_index: int = Field(..., ge=1)
    contributed: float = Field(..., ge=0)
    value: float = Field(..., ge=0)
    gain: float


class ProjectionSummary(BaseModel):
    """Totals plus the yearly series they were taken from."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    total_contributed: float = Field(..., ge=0)
    total_value: float = Field(..., ge=0)
    total_gain: float
    series: List[ProjectionPoint]
