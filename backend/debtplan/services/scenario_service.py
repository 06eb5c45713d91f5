"""Scenario boundary: engine results (cents, inf) to currency-unit responses.

`calculate_extra_payment_scenario` and `calculate_refinance_scenario` are the
public entry points for callers outside the engine; like
`calculate_total_interest` they speak currency units, with nulls where a run
never pays off.
"""
from __future__ import annotations

from datetime import date

from debtplan.models.debt import Debt
from debtplan.models.scenario import RunSummary, ScenarioResponse
from debtplan.simulation.amortization import AmortizationResult
from debtplan.simulation.money import from_cents
from debtplan.simulation.scenarios import ScenarioResult, evaluate_extra_payment, evaluate_refinance


def _run_summary(result: AmortizationResult, payment: int, annual_rate: float) -> RunSummary:
    return RunSummary(
        payment=from_cents(payment),
        interest_rate=annual_rate,
        converges=result.converges,
        payoff_months=result.months_to_payoff if result.converges else None,
        total_interest=from_cents(result.total_interest) if result.converges else None,
    )


def to_response(result: ScenarioResult) -> ScenarioResponse:
    return ScenarioResponse(
        kind=result.kind.value,
        outcome=result.outcome.value,
        baseline=_run_summary(result.baseline, result.baseline_payment, result.baseline_rate),
        scenario=_run_summary(result.modified, result.payment, result.annual_rate),
        new_payoff_date=result.new_payoff_date,
        months_saved=result.months_saved,
        total_interest_saved=(
            from_cents(result.total_interest_saved)
            if result.total_interest_saved is not None else None
        ),
    )


def calculate_extra_payment_scenario(
    debt: Debt, extra_above_minimum: float, today: date | None = None,
) -> ScenarioResponse:
    """Extra-payment what-if in currency units."""
    return to_response(evaluate_extra_payment(debt, extra_above_minimum, today))


def calculate_refinance_scenario(
    debt: Debt, new_annual_rate: float, today: date | None = None,
) -> ScenarioResponse:
    """Refinance what-if in currency units."""
    return to_response(evaluate_refinance(debt, new_annual_rate, today))
