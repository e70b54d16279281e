"""
Calculator configuration: defaults and input ranges of the reference UI.

Ranges are applied by ``calculators.domain.inputs`` when turning raw form text
into requests. The core projectors never clamp.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldRange(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    minimum: float = Field(ge=0)
    maximum: float = Field(ge=0)
    default: float = Field(ge=0)

    @model_validator(mode="after")
    def ensure_ordering(self) -> "FieldRange":
        if self.maximum < self.minimum:
            raise ValueError("maximum must be greater than or equal to minimum")
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError("default must lie within [minimum, maximum]")
        return self


# HRA rule parameters
METRO_SALARY_SHARE = 0.5
NON_METRO_SALARY_SHARE = 0.4
RENT_THRESHOLD_SHARE = 0.1

# Step-up SIP horizon used by the reference UI
STEP_UP_DEFAULT_YEARS = 40

CALCULATOR_LIMITS: Dict[str, Dict[str, FieldRange]] = {
    "sip": {
        "periodic_contribution": FieldRange(minimum=500, maximum=100_000, default=5_000),
        "annual_rate_percent": FieldRange(minimum=1, maximum=30, default=12),
        "years": FieldRange(minimum=1, maximum=30, default=10),
    },
    "lumpsum": {
        "periodic_contribution": FieldRange(minimum=1_000, maximum=10_000_000, default=100_000),
        "annual_rate_percent": FieldRange(minimum=1, maximum=30, default=12),
        "years": FieldRange(minimum=1, maximum=30, default=10),
    },
    "step_up_sip": {
        "initial_monthly_contribution": FieldRange(minimum=500, maximum=500_000, default=5_000),
        "annual_step_up_percent": FieldRange(minimum=0, maximum=100, default=10),
        "annual_rate_percent": FieldRange(minimum=1, maximum=30, default=12),
        "years": FieldRange(
            minimum=STEP_UP_DEFAULT_YEARS,
            maximum=STEP_UP_DEFAULT_YEARS,
            default=STEP_UP_DEFAULT_YEARS,
        ),
    },
    "swp": {
        "initial_corpus": FieldRange(minimum=0, maximum=100_000_000, default=1_000_000),
        "monthly_withdrawal": FieldRange(minimum=0, maximum=1_000_000, default=10_000),
        "annual_rate_percent": FieldRange(minimum=0, maximum=30, default=12),
        "years": FieldRange(minimum=1, maximum=30, default=10),
    },
}
