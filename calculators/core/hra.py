"""HRA exemption: the least of actual HRA, the salary share and rent above 10% of salary."""

from __future__ import annotations

import logging

from calculators.constants import (
    METRO_SALARY_SHARE,
    NON_METRO_SALARY_SHARE,
    RENT_THRESHOLD_SHARE,
)
from calculators.core.rates import MONTHS_PER_YEAR
from calculators.schemas.hra import HRAComponents, HRAReport, HRARequest, HRAResult

logger = logging.getLogger(__name__)


def monthly_to_yearly(amount: float) -> float:
    return amount * MONTHS_PER_YEAR


def yearly_to_monthly(amount: float) -> float:
    return amount / MONTHS_PER_YEAR


def compute_hra(request: HRARequest) -> HRAResult:
    salary = request.basic_plus_da
    share = METRO_SALARY_SHARE if request.is_metro_city else NON_METRO_SALARY_SHARE

    actual_hra = request.hra_received
    salary_percent_limit = salary * share
    rent_excess = max(0.0, request.rent_paid - salary * RENT_THRESHOLD_SHARE)

    exempted_hra = max(0.0, min(actual_hra, salary_percent_limit, rent_excess))
    taxable_hra = request.hra_received - exempted_hra

    logger.debug(
        "hra salary=%s received=%s rent=%s metro=%s -> exempt=%s",
        salary,
        request.hra_received,
        request.rent_paid,
        request.is_metro_city,
        exempted_hra,
    )
    return HRAResult(
        exempted_hra=exempted_hra,
        taxable_hra=taxable_hra,
        components=HRAComponents(
            actual_hra=actual_hra,
            salary_percent_limit=salary_percent_limit,
            rent_excess=rent_excess,
        ),
    )


def hra_report(request: HRARequest) -> HRAReport:
    """Monthly result plus the same row multiplied by 12."""
    monthly = compute_hra(request)
    return HRAReport(monthly=monthly, yearly=monthly.scaled(MONTHS_PER_YEAR))
