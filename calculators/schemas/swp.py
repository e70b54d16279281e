"""Data contracts for systematic withdrawal plans."""

from pydantic import BaseModel, ConfigDict, Field


class SWPRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    initial_corpus: float = Field(..., ge=0)
    monthly_withdrawal: float = Field(..., ge=0)
    annual_rate_percent: float = Field(..., ge=0)
    years: int = Field(..., ge=1)


class SWPSummary(BaseModel):
    """Outcome of an SWP at the end of its term."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    total_invested: float = Field(..., ge=0)
    total_withdrawn: float = Field(..., ge=0)
    # floored at zero; the month the corpus runs out is not reported
    final_value: float = Field(..., ge=0)
