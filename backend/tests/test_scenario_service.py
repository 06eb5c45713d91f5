"""Tests for the currency-unit scenario entry points."""
from datetime import date

import pytest

from debtplan.errors import InvalidAmortizationInput
from debtplan.models.debt import Debt
from debtplan.services.scenario_service import (
    calculate_extra_payment_scenario,
    calculate_refinance_scenario,
)
from debtplan.simulation.amortization import calculate_payoff_months, calculate_total_interest

_TODAY = date(2026, 1, 31)


def _make_debt(**overrides) -> Debt:
    defaults = dict(
        id="D001",
        name="Visa",
        current_balance=5000.0,
        original_balance=8000.0,
        interest_rate=0.20,
        minimum_payment=150.0,
    )
    defaults.update(overrides)
    return Debt(**defaults)


def test_refinance_to_zero_saves_all_baseline_interest():
    response = calculate_refinance_scenario(_make_debt(), 0.0, today=_TODAY)
    assert response.total_interest_saved == calculate_total_interest(5000, 0.20, 150)
    assert response.baseline.total_interest == calculate_total_interest(5000, 0.20, 150)
    assert response.scenario.total_interest == 0.0


def test_refinance_amounts_are_currency_units():
    response = calculate_refinance_scenario(_make_debt(), 0.10, today=_TODAY)
    assert response.kind == "refinance"
    assert response.outcome == "comparable"
    assert response.baseline.payment == 150.0
    assert response.scenario.payment == 150.0
    expected = calculate_total_interest(5000, 0.20, 150) - calculate_total_interest(5000, 0.10, 150)
    assert response.total_interest_saved == pytest.approx(expected, abs=0.005)


def test_extra_payment_amounts_are_currency_units():
    response = calculate_extra_payment_scenario(_make_debt(), 50, today=_TODAY)
    assert response.kind == "extra_payment"
    assert response.scenario.payment == 200.0
    assert response.scenario.payoff_months == calculate_payoff_months(5000, 0.20, 200)
    assert response.months_saved == (
        calculate_payoff_months(5000, 0.20, 150) - calculate_payoff_months(5000, 0.20, 200)
    )
    expected = calculate_total_interest(5000, 0.20, 150) - calculate_total_interest(5000, 0.20, 200)
    assert response.total_interest_saved == pytest.approx(expected, abs=0.005)


def test_non_converging_scenario_uses_nulls():
    response = calculate_extra_payment_scenario(_make_debt(minimum_payment=50.0), 10, today=_TODAY)
    assert response.outcome == "neither_converges"
    assert response.total_interest_saved is None
    assert response.months_saved is None
    assert response.new_payoff_date is None
    assert response.scenario.total_interest is None


def test_negative_extra_payment_rejected():
    with pytest.raises(InvalidAmortizationInput):
        calculate_extra_payment_scenario(_make_debt(), -5)
