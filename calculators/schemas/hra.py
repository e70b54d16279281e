"""Data contracts for the HRA exemption calculator."""

from pydantic import BaseModel, ConfigDict, Field


class HRARequest(BaseModel):
    """Salary figures for one period (a month in the reference UI)."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    basic_plus_da: float = Field(..., ge=0, description="Basic salary plus dearness allowance.")
    hra_received: float = Field(..., ge=0)
    rent_paid: float = Field(..., ge=0)
    is_metro_city: bool = False


class HRAComponents(BaseModel):
    """The three amounts whose minimum is exempt."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    actual_hra: float = Field(..., ge=0)
    salary_percent_limit: float = Field(..., ge=0)
    rent_excess: float = Field(..., ge=0)


class HRAResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    exempted_hra: float = Field(..., ge=0)
    taxable_hra: float
    components: HRAComponents

    def scaled(self, factor: float) -> "HRAResult":
        """Multiply every amount by ``factor`` without re-applying the rule."""
        return HRAResult(
            exempted_hra=self.exempted_hra * factor,
            taxable_hra=self.taxable_hra * factor,
            components=HRAComponents(
                actual_hra=self.components.actual_hra * factor,
                salary_percent_limit=self.components.salary_percent_limit * factor,
                rent_excess=self.components.rent_excess * factor,
            ),
        )


class HRAReport(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    monthly: HRAResult
    yearly: HRAResult
