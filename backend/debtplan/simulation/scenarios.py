"""What-if scenarios: re-run the amortization model with modified inputs.

Every scenario runs the simulator twice, once on the debt as it stands
(baseline: minimum payment, current rate) and once with the modified
payment or rate, and reports the difference.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from debtplan.config import settings
from debtplan.errors import InvalidAmortizationInput
from debtplan.formatting import payoff_date
from debtplan.models.debt import Debt
from debtplan.simulation.amortization import AmortizationResult, simulate
from debtplan.simulation.money import to_cents

logger = logging.getLogger(__name__)


class ScenarioKind(str, Enum):
    extra_payment = "extra_payment"
    refinance = "refinance"
    payment_multiplier = "payment_multiplier"


class ScenarioOutcome(str, Enum):
    """Whether baseline and scenario can be diffed in finite terms."""
    comparable = "comparable"
    baseline_never_converges = "baseline_never_converges"
    scenario_never_converges = "scenario_never_converges"
    neither_converges = "neither_converges"


@dataclass(frozen=True)
class ScenarioResult:
    """Baseline vs. modified run. Amounts are cents.

    Engine-internal; services.scenario_service converts it to currency units.

    `months_saved` and `total_interest_saved` are None unless the outcome is
    comparable. `new_payoff_date` is None when the modified run never pays off.
    """
    kind: ScenarioKind
    outcome: ScenarioOutcome
    baseline: AmortizationResult
    modified: AmortizationResult
    baseline_payment: int
    payment: int
    baseline_rate: float
    annual_rate: float
    new_payoff_date: date | None
    months_saved: int | None
    total_interest_saved: int | None


def evaluate_extra_payment(
    debt: Debt, extra_amount: float, today: date | None = None,
) -> ScenarioResult:
    """Pay `extra_amount` on top of the minimum payment every month."""
    if not math.isfinite(extra_amount) or extra_amount < 0:
        raise InvalidAmortizationInput(
            f"Extra payment must be a non-negative amount, got {extra_amount!r}"
        )
    baseline_payment = to_cents(debt.minimum_payment)
    return _compare(
        ScenarioKind.extra_payment,
        debt,
        payment=baseline_payment + to_cents(extra_amount),
        annual_rate=debt.interest_rate,
        today=today,
    )


def evaluate_refinance(
    debt: Debt, new_annual_rate: float, today: date | None = None,
) -> ScenarioResult:
    """Keep the minimum payment, swap in `new_annual_rate`.

    Rates at or above the current rate still produce a result; savings can
    then be zero or negative. Whether to show it is the caller's call.
    """
    return _compare(
        ScenarioKind.refinance,
        debt,
        payment=to_cents(debt.minimum_payment),
        annual_rate=new_annual_rate,
        today=today,
    )


def evaluate_payment_multiplier(
    debt: Debt, multiplier: float | None = None, today: date | None = None,
) -> ScenarioResult:
    """Pay `multiplier` times the minimum (default settings.DEFAULT_PAYMENT_MULTIPLIER)."""
    if multiplier is None:
        multiplier = settings.DEFAULT_PAYMENT_MULTIPLIER
    if not math.isfinite(multiplier) or multiplier < 0:
        raise InvalidAmortizationInput(f"Multiplier must be non-negative, got {multiplier!r}")
    return _compare(
        ScenarioKind.payment_multiplier,
        debt,
        payment=to_cents(debt.minimum_payment * multiplier),
        annual_rate=debt.interest_rate,
        today=today,
    )


def _compare(
    kind: ScenarioKind,
    debt: Debt,
    payment: int,
    annual_rate: float,
    today: date | None,
) -> ScenarioResult:
    balance = to_cents(debt.current_balance)
    baseline_payment = to_cents(debt.minimum_payment)

    baseline = simulate(balance, debt.interest_rate, baseline_payment)
    modified = simulate(balance, annual_rate, payment)

    months_saved: int | None = None
    interest_saved: int | None = None
    if baseline.converges and modified.converges:
        outcome = ScenarioOutcome.comparable
        months_saved = baseline.months_to_payoff - modified.months_to_payoff
        interest_saved = baseline.total_interest - modified.total_interest
    elif modified.converges:
        outcome = ScenarioOutcome.baseline_never_converges
    elif baseline.converges:
        outcome = ScenarioOutcome.scenario_never_converges
    else:
        outcome = ScenarioOutcome.neither_converges

    if outcome is not ScenarioOutcome.comparable:
        logger.debug("%s scenario for debt %s: %s", kind.value, debt.id, outcome.value)

    return ScenarioResult(
        kind=kind,
        outcome=outcome,
        baseline=baseline,
        modified=modified,
        baseline_payment=baseline_payment,
        payment=payment,
        baseline_rate=debt.interest_rate,
        annual_rate=annual_rate,
        new_payoff_date=payoff_date(modified.months_to_payoff, today),
        months_saved=months_saved,
        total_interest_saved=interest_saved,
    )

