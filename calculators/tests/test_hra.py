from __future__ import annotations

from math import isclose

import pytest
from pydantic import ValidationError

from calculators.core.hra import compute_hra, hra_report, monthly_to_yearly, yearly_to_monthly
from calculators.schemas.hra import HRARequest


def hra_request(**overrides) -> HRARequest:
    payload = {
        "basic_plus_da": 50000,
        "hra_received": 20000,
        "rent_paid": 15000,
        "is_metro_city": False,
    }
    payload.update(overrides)
    return HRARequest(**payload)


def test_non_metro_reference_scenario():
    result = compute_hra(hra_request())

    assert result.components.actual_hra == 20000
    assert result.components.salary_percent_limit == 20000
    assert result.components.rent_excess == 10000
    assert result.exempted_hra == 10000
    assert result.taxable_hra == 10000


def test_metro_city_uses_half_of_salary():
    result = compute_hra(hra_request(is_metro_city=True, rent_paid=40000))

    assert result.components.salary_percent_limit == 25000
    assert result.exempted_hra == 20000
    assert result.taxable_hra == 0


def test_rent_below_threshold_exempts_nothing():
    result = compute_hra(hra_request(rent_paid=3000))

    assert result.components.rent_excess == 0
    assert result.exempted_hra == 0
    assert result.taxable_hra == 20000


@pytest.mark.parametrize("basic", [0, 15000, 50000, 250000])
@pytest.mark.parametrize("received", [0, 8000, 20000, 90000])
@pytest.mark.parametrize("rent", [0, 4000, 15000, 60000])
@pytest.mark.parametrize("metro", [True, False])
def test_exemption_bounds(basic, received, rent, metro):
    result = compute_hra(
        hra_request(basic_plus_da=basic, hra_received=received, rent_paid=rent, is_metro_city=metro)
    )
    components = result.components

    assert 0 <= result.exempted_hra
    assert result.exempted_hra <= components.actual_hra
    assert result.exempted_hra <= components.salary_percent_limit
    assert result.exempted_hra <= components.rent_excess
    assert result.taxable_hra + result.exempted_hra == received
    assert result.taxable_hra >= 0


def test_yearly_report_is_monthly_times_twelve():
    report = hra_report(hra_request())

    assert report.yearly.exempted_hra == report.monthly.exempted_hra * 12
    assert report.yearly.taxable_hra == report.monthly.taxable_hra * 12
    assert report.yearly.components.actual_hra == 240000
    assert report.yearly.components.salary_percent_limit == 240000
    assert report.yearly.components.rent_excess == 120000


def test_monthly_yearly_conversion():
    assert monthly_to_yearly(1500) == 18000
    assert isclose(yearly_to_monthly(18000), 1500)


def test_negative_rent_is_rejected():
    with pytest.raises(ValidationError):
        hra_request(rent_paid=-1)
