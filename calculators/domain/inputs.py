"""
Caller-side input handling.

Turns raw form values (usually text) into validated requests:
  1) Parse each field, keeping only digits and '.'; anything unparsable is 0.
  2) Return None when a required field is absent or zero ("no result" state).
  3) Clamp the remaining values to the reference UI ranges.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from calculators.constants import CALCULATOR_LIMITS, FieldRange
from calculators.core.hra import yearly_to_monthly
from calculators.schemas.hra import HRARequest
from calculators.schemas.sip import SIPMode, SIPRequest
from calculators.schemas.step_up_sip import StepUpSIPRequest
from calculators.schemas.swp import SWPRequest

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d*\.?\d*")

_TRUTHY = {"yes", "y", "true", "1", "on", "metro"}

# tab values used by the reference UI
_MODE_ALIASES = {"monthly": SIPMode.PERIODIC}


def parse_amount(raw: Any) -> float:
    """
    Parse user input into a finite non-negative float.

    Examples:
        >>> parse_amount("₹5,000")
        5000.0
        >>> parse_amount("abc")
        0.0
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) and value >= 0 else 0.0

    cleaned = _NON_NUMERIC.sub("", str(raw))
    match = _LEADING_NUMBER.match(cleaned)
    number = match.group(0) if match else ""
    if number in ("", "."):
        return 0.0
    value = float(number)
    return value if math.isfinite(value) else 0.0


def parse_flag(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    return str(raw).strip().lower() in _TRUTHY


def clamp(value: float, limits: FieldRange) -> float:
    return min(max(value, limits.minimum), limits.maximum)


def _clamped(form: Mapping[str, Any], key: str, limits: Mapping[str, FieldRange], apply: bool) -> float:
    value = parse_amount(form.get(key))
    return clamp(value, limits[key]) if apply else value


def _years(value: float) -> int:
    return int(round(value))


def sip_request_from_form(form: Mapping[str, Any], clamp_to_limits: bool = True) -> Optional[SIPRequest]:
    raw_mode = str(form.get("mode") or SIPMode.PERIODIC.value).strip().lower()
    mode = _MODE_ALIASES.get(raw_mode)
    if mode is None:
        try:
            mode = SIPMode(raw_mode)
        except ValueError:
            return None
    limits = CALCULATOR_LIMITS["lumpsum" if mode == SIPMode.LUMPSUM else "sip"]

    if not parse_amount(form.get("periodic_contribution")) or not _years(parse_amount(form.get("years"))):
        return None

    return SIPRequest(
        periodic_contribution=_clamped(form, "periodic_contribution", limits, clamp_to_limits),
        annual_rate_percent=_clamped(form, "annual_rate_percent", limits, clamp_to_limits),
        years=_years(_clamped(form, "years", limits, clamp_to_limits)),
        mode=mode,
    )


def step_up_sip_request_from_form(
    form: Mapping[str, Any], clamp_to_limits: bool = True
) -> Optional[StepUpSIPRequest]:
    limits = CALCULATOR_LIMITS["step_up_sip"]

    if not parse_amount(form.get("initial_monthly_contribution")):
        return None

    # the reference UI fixes the horizon; an explicit value is honoured unclamped
    if form.get("years") is not None:
        years = _years(parse_amount(form.get("years")))
        if not years:
            return None
    else:
        years = _years(limits["years"].default)

    return StepUpSIPRequest(
        initial_monthly_contribution=_clamped(form, "initial_monthly_contribution", limits, clamp_to_limits),
        annual_step_up_percent=_clamped(form, "annual_step_up_percent", limits, clamp_to_limits),
        annual_rate_percent=_clamped(form, "annual_rate_percent", limits, clamp_to_limits),
        years=years,
    )


def swp_request_from_form(form: Mapping[str, Any], clamp_to_limits: bool = True) -> Optional[SWPRequest]:
    limits = CALCULATOR_LIMITS["swp"]

    if not parse_amount(form.get("initial_corpus")) or not _years(parse_amount(form.get("years"))):
        return None

    return SWPRequest(
        initial_corpus=_clamped(form, "initial_corpus", limits, clamp_to_limits),
        monthly_withdrawal=_clamped(form, "monthly_withdrawal", limits, clamp_to_limits),
        annual_rate_percent=_clamped(form, "annual_rate_percent", limits, clamp_to_limits),
        years=_years(_clamped(form, "years", limits, clamp_to_limits)),
    )


def _monthly_amount(form: Mapping[str, Any], key: str) -> float:
    """Read ``key`` as a monthly amount, falling back to ``<key>_yearly`` / 12."""
    monthly = parse_amount(form.get(key))
    if monthly:
        return monthly
    return yearly_to_monthly(parse_amount(form.get(f"{key}_yearly")))


def hra_request_from_form(form: Mapping[str, Any]) -> Optional[HRARequest]:
    basic_salary = _monthly_amount(form, "basic_salary")
    dearness_allowance = _monthly_amount(form, "dearness_allowance")
    hra_received = _monthly_amount(form, "hra_received")
    rent_paid = _monthly_amount(form, "rent_paid")

    if not basic_salary or not hra_received or not rent_paid:
        return None

    return HRARequest(
        basic_plus_da=basic_salary + dearness_allowance,
        hra_received=hra_received,
        rent_paid=rent_paid,
        is_metro_city=parse_flag(form.get("is_metro_city")),
    )
