"""Debt projection service.

Assembles what the debt screens show for a debt: the baseline payoff
projection, the payment-breakdown chart window, progress and portfolio totals.
"""
from __future__ import annotations

import math
from datetime import date
from decimal import Decimal
from typing import Literal, Sequence

from debtplan.config import settings
from debtplan.formatting import (
    format_currency,
    format_date,
    format_duration,
    format_percentage,
    payoff_date,
)
from debtplan.models.debt import Debt, DebtSummary
from debtplan.models.schedule import CostBreakdown, PayoffProjection, ProjectionDisplay, ScheduleEntry
from debtplan.simulation.amortization import (
    PaymentScheduleEntry,
    monthly_interest_charge,
    payment_covers_interest,
    preview_schedule,
    simulate,
)
from debtplan.simulation.money import from_cents, round_half_up, to_cents

_NON_CONVERGENT_WINDOW = 12


def debt_progress(debt: Debt) -> int:
    """Whole percent of the original balance already paid off."""
    original = to_cents(debt.original_balance)
    if original <= 0:
        return 100
    return _percent(original - to_cents(debt.current_balance), original)


def _percent(part: int, whole: int) -> int:
    """Whole percent of `whole`, halves rounded up (37.5 -> 38, 0.5 -> 1)."""
    return round_half_up(Decimal(part) * 100 / Decimal(whole))


def summarize_debts(debts: Sequence[Debt]) -> DebtSummary:
    total_balance = sum(to_cents(d.current_balance) for d in debts)
    total_original = sum(to_cents(d.original_balance) for d in debts)
    total_minimum = sum(to_cents(d.minimum_payment) for d in debts)
    progress = (
        _percent(total_original - total_balance, total_original)
        if total_original > 0 else 0
    )
    return DebtSummary(
        total_balance=from_cents(total_balance),
        total_original_balance=from_cents(total_original),
        total_minimum_payment=from_cents(total_minimum),
        debt_count=len(debts),
        progress=progress,
    )


def cost_breakdown(balance: int, total_interest: int | float) -> CostBreakdown | None:
    """Principal vs. interest share of the total cost, as whole percents.

    None when there is nothing to split or the debt never pays off.
    """
    if balance <= 0 or math.isinf(total_interest):
        return None
    principal_percent = _percent(balance, balance + int(total_interest))
    return CostBreakdown(
        principal_percent=principal_percent,
        interest_percent=100 - principal_percent,
    )


def chart_window(duration: int | Literal["all"], payoff_months: int | float) -> int:
    """Number of months the payment-breakdown chart should show.

    "all" shows the whole payoff up to settings.CHART_ALL_MAX_MONTHS; a fixed
    duration never runs past the payoff month. A debt that never pays off
    gets a 12-month window for "all" and the requested duration otherwise.
    """
    if duration == "all":
        if math.isinf(payoff_months):
            return _NON_CONVERGENT_WINDOW
        return min(int(payoff_months), settings.CHART_ALL_MAX_MONTHS)
    if math.isinf(payoff_months):
        return duration
    return min(duration, int(payoff_months))


def to_schedule_entries(schedule: Sequence[PaymentScheduleEntry]) -> list[ScheduleEntry]:
    return [
        ScheduleEntry(
            month=e.month,
            principal=from_cents(e.principal),
            interest=from_cents(e.interest),
            payment=from_cents(e.payment),
            balance=from_cents(e.balance),
        )
        for e in schedule
    ]


def build_projection(
    debt: Debt,
    window: int | Literal["all"] = 12,
    currency: str | None = None,
    today: date | None = None,
) -> PayoffProjection:
    """Baseline payoff projection at the debt's minimum payment."""
    balance = to_cents(debt.current_balance)
    full = simulate(balance, debt.interest_rate, to_cents(debt.minimum_payment))
    window_months = chart_window(window, full.months_to_payoff)
    if full.converges:
        schedule = full.schedule[:window_months]
    else:
        schedule = preview_schedule(
            balance, debt.interest_rate, to_cents(debt.minimum_payment), window_months,
        )

    due = payoff_date(full.months_to_payoff, today)
    return PayoffProjection(
        debt_id=debt.id,
        converges=full.converges,
        payoff_months=full.months_to_payoff if full.converges else None,
        total_interest=from_cents(full.total_interest) if full.converges else None,
        payoff_date=due,
        monthly_interest=monthly_interest_charge(debt.current_balance, debt.interest_rate),
        payment_covers_interest=payment_covers_interest(
            debt.current_balance, debt.interest_rate, debt.minimum_payment,
        ),
        progress=debt_progress(debt),
        cost_breakdown=cost_breakdown(balance, full.total_interest),
        window_months=len(schedule),
        schedule=to_schedule_entries(schedule),
        display=ProjectionDisplay(
            balance=format_currency(balance, currency),
            total_interest=format_currency(full.total_interest, currency),
            payoff_date=format_date(due),
            duration=format_duration(full.months_to_payoff),
            interest_rate=format_percentage(debt.interest_rate),
        ),
    )
