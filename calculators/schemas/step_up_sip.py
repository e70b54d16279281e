"""Data contracts for step-up SIP projections."""

from pydantic import BaseModel, ConfigDict, Field

from calculators.constants import STEP_UP_DEFAULT_YEARS


class StepUpSIPRequest(BaseModel):
    """A monthly SIP whose contribution grows by a fixed percentage every year."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    initial_monthly_contribution: float = Field(..., ge=0)
    annual_step_up_percent: float = Field(
        ...,
        ge=0,
        description="Yearly increase of the monthly contribution, as a percentage.",
    )
    annual_rate_percent: float = Field(..., ge=0)
    years: int = Field(STEP_UP_DEFAULT_YEARS, ge=1)
