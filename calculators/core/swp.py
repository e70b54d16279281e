"""Systematic withdrawal plan projection."""

from __future__ import annotations

import logging
import math

from calculators.core.rates import annual_pct_to_monthly_decimal, years_to_months
from calculators.schemas.swp import SWPRequest, SWPSummary

logger = logging.getLogger(__name__)


def project_swp(request: SWPRequest) -> SWPSummary:
    """
    Closed-form decumulation.

    FV = P * (1 + r)^n - w * [(1 + r)^n - 1] / r, floored at zero. A corpus
    that runs out before the end of the term is reported as a final value of
    zero; the depletion month itself is not computed.
    """
    monthly_rate = annual_pct_to_monthly_decimal(request.annual_rate_percent)
    months = years_to_months(request.years)

    power_term = (1 + monthly_rate) ** months
    growth_component = request.initial_corpus * power_term
    if monthly_rate == 0:
        withdrawal_component = request.monthly_withdrawal * months
    else:
        withdrawal_component = request.monthly_withdrawal * (power_term - 1) / monthly_rate

    remaining = growth_component - withdrawal_component
    if not math.isfinite(remaining):
        raise OverflowError("withdrawal plan value is not a finite number")
    final_value = max(0.0, remaining)

    logger.debug(
        "swp corpus=%s withdrawal=%s rate=%s%% years=%s -> final=%s",
        request.initial_corpus,
        request.monthly_withdrawal,
        request.annual_rate_percent,
        request.years,
        final_value,
    )
    return SWPSummary(
        total_invested=request.initial_corpus,
        total_withdrawn=request.monthly_withdrawal * months,
        final_value=final_value,
    )
