from __future__ import annotations

from math import isclose

import pytest

from calculators.domain.errors import CalculatorError, InvalidInputError, UnknownCalculatorError
from calculators.service import CALCULATORS, run_calculator, run_calculator_form


def sip_payload() -> dict:
    return {
        "periodic_contribution": 5000,
        "annual_rate_percent": 12,
        "years": 10,
        "mode": "periodic",
    }


def test_registry_lists_all_calculators():
    assert set(CALCULATORS) == {"sip", "step_up_sip", "swp", "hra"}


def test_sip_payload_returns_summary_dict():
    result = run_calculator("sip", sip_payload())

    assert result["total_contributed"] == 600000
    assert isclose(result["total_value"], 1161695, abs_tol=1.0)
    assert len(result["series"]) == 10
    assert result["series"][0]["period_index"] == 1


def test_hra_payload_returns_monthly_and_yearly():
    result = run_calculator(
        "hra",
        {"basic_plus_da": 50000, "hra_received": 20000, "rent_paid": 15000, "is_metro_city": False},
    )

    assert result["monthly"]["exempted_hra"] == 10000
    assert result["yearly"]["exempted_hra"] == 120000
    assert result["yearly"]["components"]["rent_excess"] == 120000


def test_swp_payload_returns_summary():
    result = run_calculator(
        "swp",
        {"initial_corpus": 1_000_000, "monthly_withdrawal": 10_000, "annual_rate_percent": 12, "years": 10},
    )

    assert result["total_withdrawn"] == 1_200_000
    assert result["total_invested"] == 1_000_000


def test_invalid_payload_raises_invalid_input():
    payload = sip_payload()
    payload["years"] = 0

    with pytest.raises(InvalidInputError) as excinfo:
        run_calculator("sip", payload)

    assert isinstance(excinfo.value, ValueError)
    assert any(message.startswith("years") for message in excinfo.value.errors)


def test_unknown_field_is_rejected():
    payload = sip_payload()
    payload["inflation"] = 6

    with pytest.raises(InvalidInputError):
        run_calculator("sip", payload)


def test_unknown_calculator():
    with pytest.raises(UnknownCalculatorError) as excinfo:
        run_calculator("fd", {})

    assert isinstance(excinfo.value, CalculatorError)
    assert "fd" in str(excinfo.value)


def test_form_run_returns_none_until_complete():
    assert run_calculator_form("hra", {"basic_salary": "50000"}) is None


def test_form_run_computes_step_up():
    result = run_calculator_form(
        "step_up_sip",
        {"initial_monthly_contribution": "5000", "annual_step_up_percent": "10", "annual_rate_percent": "12"},
    )

    assert result is not None
    assert len(result["series"]) == 40
    assert result["total_value"] > result["total_contributed"]


@pytest.mark.parametrize(
    "name, payload",
    [
        ("sip", {"periodic_contribution": 5000, "annual_rate_percent": 1e6, "years": 10}),
        ("sip", {"periodic_contribution": 5000, "annual_rate_percent": 1e6, "years": 100, "mode": "lumpsum"}),
        (
            "swp",
            {"initial_corpus": 1_000_000, "monthly_withdrawal": 10_000, "annual_rate_percent": 1e6, "years": 10},
        ),
        ("swp", {"initial_corpus": 1e306, "monthly_withdrawal": 0, "annual_rate_percent": 30, "years": 30}),
        (
            "step_up_sip",
            {
                "initial_monthly_contribution": 5000,
                "annual_step_up_percent": 10,
                "annual_rate_percent": 1e6,
                "years": 10,
            },
        ),
    ],
)
def test_overflowing_calculation_raises_invalid_input(name, payload):
    """Inputs that pass validation but overflow the arithmetic are rejected, never returned as inf/NaN."""
    with pytest.raises(InvalidInputError) as excinfo:
        run_calculator(name, payload)

    assert excinfo.value.errors
