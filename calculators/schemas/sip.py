"""Data contracts for SIP and lump-sum projections."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SIPMode(str, Enum):
    PERIODIC = "periodic"
    LUMPSUM = "lumpsum"


class SIPRequest(BaseModel):
    """Inputs required to project a SIP or a one-off lump sum."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    periodic_contribution: float = Field(
        ...,
        ge=0,
        description="Monthly contribution, or the principal in lumpsum mode.",
    )
    annual_rate_percent: float = Field(
        ...,
        ge=0,
        description="Expected annual return as a percentage (e.g. 12 for 12%).",
    )
    years: int = Field(..., ge=1, description="Number of years to project.")
    mode: SIPMode = SIPMode.PERIODIC
