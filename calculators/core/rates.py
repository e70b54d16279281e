"""
Rate conversion helpers.

Conventions:
- All inputs are annual rates as percentages (e.g., 12.0 = 12%)
- All calculations use decimal rates (e.g., 0.12 = 12%)
- Monthly rates are the annual decimal divided by 12
"""

MONTHS_PER_YEAR = 12


def annual_pct_to_decimal(rate_pct: float) -> float:
    """
    Convert annual percentage rate to decimal format.

    Examples:
        >>> annual_pct_to_decimal(12.0)
        0.12
    """
    return float(rate_pct) / 100.0


def annual_pct_to_monthly_decimal(rate_pct: float) -> float:
    """
    Convert annual percentage rate directly to monthly decimal rate.

    Examples:
        >>> annual_pct_to_monthly_decimal(12.0)
        0.01
    """
    return float(rate_pct) / (MONTHS_PER_YEAR * 100.0)


def years_to_months(years: int) -> int:
    return int(years) * MONTHS_PER_YEAR
