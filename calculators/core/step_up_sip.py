"""Step-up SIP projection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from calculators.core.rates import MONTHS_PER_YEAR, annual_pct_to_monthly_decimal
from calculators.schemas.projection import ProjectionPoint, ProjectionSummary
from calculators.schemas.step_up_sip import StepUpSIPRequest

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    balance: float
    contributed: float
    contribution: float


def project_step_up_sip(request: StepUpSIPRequest) -> ProjectionSummary:
    """
    Month-by-month fold; the contribution is raised once a year.

    Order of operations (per month):
      1) Add the contribution to the balance.
      2) Compound the balance by the monthly rate.
    After the 12th month the contribution grows by the step-up percentage
    (compounding, not additive).
    """
    monthly_rate = annual_pct_to_monthly_decimal(request.annual_rate_percent)
    step_up = request.annual_step_up_percent / 100.0

    acc = _Accumulator(
        balance=0.0,
        contributed=0.0,
        contribution=float(request.initial_monthly_contribution),
    )
    series: List[ProjectionPoint] = []

    for year in range(1, request.years + 1):
        for _ in range(MONTHS_PER_YEAR):
            acc.contributed += acc.contribution
            acc.balance = (acc.balance + acc.contribution) * (1 + monthly_rate)

        series.append(
            ProjectionPoint(
                period_index=year,
                contributed=acc.contributed,
                value=acc.balance,
                gain=acc.balance - acc.contributed,
            )
        )
        acc.contribution = acc.contribution * (1 + step_up)

    last = series[-1]
    logger.debug(
        "step-up sip start=%s step_up=%s%% rate=%s%% years=%s -> value=%s",
        request.initial_monthly_contribution,
        request.annual_step_up_percent,
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
