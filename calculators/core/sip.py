"""SIP and lump-sum projection."""

from __future__ import annotations

import logging
from typing import List

from calculators.core.rates import (
    annual_pct_to_decimal,
    annual_pct_to_monthly_decimal,
    years_to_months,
)
from calculators.schemas.projection import ProjectionPoint, ProjectionSummary
from calculators.schemas.sip import SIPMode, SIPRequest

logger = logging.getLogger(__name__)


def future_value_annuity_due(contribution: float, monthly_rate: float, months: int) -> float:
    """
    Future value of ``months`` contributions made at the start of each month.

    Formula: P * ({[1 + i]^n - 1} / i) * (1 + i), which tends to P * n as i -> 0.
    """
    if monthly_rate == 0:
        return contribution * months
    return contribution * (((1 + monthly_rate) ** months - 1) / monthly_rate) * (1 + monthly_rate)


def future_value_lumpsum(principal: float, annual_rate: float, years: int) -> float:
    """Formula: P(1+r)^t"""
    return principal * (1 + annual_rate) ** years


def _periodic_series(request: SIPRequest) -> List[ProjectionPoint]:
    monthly_rate = annual_pct_to_monthly_decimal(request.annual_rate_percent)
    points: List[ProjectionPoint] = []
    for year in range(1, request.years + 1):
        # every year is derived from the closed form, not from the previous point
        months = years_to_months(year)
        contributed = request.periodic_contribution * months
        value = future_value_annuity_due(request.periodic_contribution, monthly_rate, months)
        points.append(
            ProjectionPoint(
                period_index=year,
                contributed=contributed,
                value=value,
                gain=value - contributed,
            )
        )
    return points


def _lumpsum_series(request: SIPRequest) -> List[ProjectionPoint]:
    annual_rate = annual_pct_to_decimal(request.annual_rate_percent)
    principal = request.periodic_contribution
    points: List[ProjectionPoint] = []
    for year in range(1, request.years + 1):
        value = future_value_lumpsum(principal, annual_rate, year)
        points.append(
            ProjectionPoint(
                period_index=year,
                contributed=principal,
                value=value,
                gain=value - principal,
            )
        )
    return points


def project_sip(request: SIPRequest) -> ProjectionSummary:
    """Project a monthly SIP (annuity-due) or a lump sum, one point per year."""
    if request.mode == SIPMode.LUMPSUM:
        series = _lumpsum_series(request)
    else:
        series = _periodic_series(request)

    last = series[-1]
    logger.debug(
        "sip mode=%s contribution=%s rate=%s%% years=%s -> value=%s",
        request.mode.value,
        request.periodic_contribution,
        request.annual_rate_percent,
        request.years,
        last.value,
    )
    return ProjectionSummary(
        total_contributed=last.contributed,
        total_value=last.value,
        total_gain=last.gain,
        series=series,
    )
