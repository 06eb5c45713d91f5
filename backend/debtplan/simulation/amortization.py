"""Amortization simulator: month-by-month payoff of a fixed-payment debt.

All amounts inside the loop are integer cents. Each period accrues interest
on the remaining balance (rounded half-up to the cent), then applies the rest
of the payment to principal. The final period only pays what remains.

Non-convergence (payment never gets ahead of interest, or the iteration cap
is exhausted) is reported with the NEVER sentinel for both the month count
and the total interest.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal

from debtplan.config import settings
from debtplan.errors import InvalidAmortizationInput
from debtplan.simulation.money import from_cents, round_half_up, to_cents

logger = logging.getLogger(__name__)

NEVER = math.inf


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """Principal/interest split for a single month, in cents."""
    month: int
    principal: int
    interest: int
    balance: int

    @property
    def payment(self) -> int:
        return self.principal + self.interest


@dataclass(frozen=True)
class AmortizationResult:
    """Schedule plus summary statistics for one balance/rate/payment triple.

    `months_to_payoff` and `total_interest` always describe the full run,
    even when `schedule` was cut to a display window.
    """
    schedule: tuple[PaymentScheduleEntry, ...]
    months_to_payoff: int | float
    total_interest: int | float

    @property
    def converges(self) -> bool:
        return not math.isinf(self.months_to_payoff)


def monthly_rate(annual_rate: float) -> Decimal:
    """Periodic rate for a nominal annual rate. Rejects negative or non-finite rates."""
    if isinstance(annual_rate, bool) or not isinstance(annual_rate, (int, float)):
        raise InvalidAmortizationInput(f"Annual rate must be a number, got {annual_rate!r}")
    if not math.isfinite(annual_rate):
        raise InvalidAmortizationInput(f"Annual rate must be finite, got {annual_rate!r}")
    if annual_rate < 0:
        raise InvalidAmortizationInput(f"Annual rate cannot be negative, got {annual_rate!r}")
    return Decimal(str(annual_rate)) / 12


def period_interest(balance: int, rate: Decimal) -> int:
    """Interest in cents accrued on `balance` cents over one period."""
    return round_half_up(balance * rate)


def simulate(
    balance: int,
    annual_rate: float,
    payment: int,
    max_months: int | None = None,
    iteration_cap: int | None = None,
) -> AmortizationResult:
    """Run the payoff loop for `balance` cents paid down by `payment` cents a month.

    Args:
        balance: Starting balance in cents.
        annual_rate: Nominal annual rate as a decimal fraction (0.20 = 20%).
        payment: Fixed monthly payment in cents.
        max_months: Optional display window. Only the returned schedule is
            cut; the summary statistics come from the full run.
        iteration_cap: Hard bound on simulated periods. Defaults to
            settings.MAX_AMORTIZATION_MONTHS.

    Returns:
        AmortizationResult. `balance <= 0` gives an empty schedule and zero
        months; a payment that never covers interest, or a run that hits the
        cap, gives NEVER for months and interest.
    """
    rate = monthly_rate(annual_rate)
    cap = settings.MAX_AMORTIZATION_MONTHS if iteration_cap is None else iteration_cap
    if cap < 1:
        raise InvalidAmortizationInput(f"Iteration cap must be at least 1, got {cap}")
    if max_months is not None and max_months < 0:
        raise InvalidAmortizationInput(f"max_months cannot be negative, got {max_months}")

    if balance <= 0:
        return AmortizationResult(schedule=(), months_to_payoff=0, total_interest=0)

    # The balance never rises, so covering the first period covers them all
    if payment <= 0 or payment <= period_interest(balance, rate):
        logger.debug(
            "Payment %d does not cover interest on %d at %s APR; never pays off",
            payment, balance, annual_rate,
        )
        return AmortizationResult(schedule=(), months_to_payoff=NEVER, total_interest=NEVER)

    schedule: list[PaymentScheduleEntry] = []
    remaining = balance
    total_interest = 0

    while remaining > 0:
        if len(schedule) >= cap:
            logger.warning(
                "Iteration cap of %d months reached with %d cents outstanding; "
                "treating as non-convergent",
                cap, remaining,
            )
            return AmortizationResult(
                schedule=_window(schedule, max_months),
                months_to_payoff=NEVER,
                total_interest=NEVER,
            )

        interest = period_interest(remaining, rate)
        principal = min(payment - interest, remaining)
        remaining = max(0, remaining - principal)
        total_interest += interest

        schedule.append(PaymentScheduleEntry(
            month=len(schedule) + 1,
            principal=principal,
            interest=interest,
            balance=remaining,
        ))

    return AmortizationResult(
        schedule=_window(schedule, max_months),
        months_to_payoff=len(schedule),
        total_interest=total_interest,
    )


def _window(
    schedule: list[PaymentScheduleEntry], max_months: int | None,
) -> tuple[PaymentScheduleEntry, ...]:
    if max_months is None:
        return tuple(schedule)
    return tuple(schedule[:max_months])


def preview_schedule(
    balance: int, annual_rate: float, payment: int, months: int,
) -> tuple[PaymentScheduleEntry, ...]:
    """First `months` periods for charting, whether or not the debt pays off.

    A payment that does not cover interest shows up as all interest and no
    principal. Unpaid interest is not added to the balance, so the balance
    never rises. Stops early if the balance reaches zero.
    """
    rate = monthly_rate(annual_rate)
    schedule: list[PaymentScheduleEntry] = []
    remaining = balance
    while remaining > 0 and len(schedule) < months:
        interest = period_interest(remaining, rate)
        principal = max(0, min(payment - interest, remaining))
        remaining -= principal
        schedule.append(PaymentScheduleEntry(
            month=len(schedule) + 1,
            principal=principal,
            interest=interest,
            balance=remaining,
        ))
    return tuple(schedule)


# ---------------------------------------------------------------------------
# Currency-unit entry points
# ---------------------------------------------------------------------------


def calculate_payoff_months(balance: float, annual_rate: float, payment: float) -> int | float:
    """Months until payoff, or NEVER (math.inf) if the payment never gets there."""
    return simulate(to_cents(balance), annual_rate, to_cents(payment)).months_to_payoff


def calculate_total_interest(balance: float, annual_rate: float, payment: float) -> float:
    """Total interest over the payoff horizon, or NEVER (math.inf)."""
    result = simulate(to_cents(balance), annual_rate, to_cents(payment))
    return from_cents(result.total_interest)


def calculate_payment_schedule(
    balance: float,
    annual_rate: float,
    payment: float,
    max_months: int | None = None,
) -> list[PaymentScheduleEntry]:
    """Month-by-month schedule (entries in cents), optionally cut to a window."""
    result = simulate(to_cents(balance), annual_rate, to_cents(payment), max_months=max_months)
    return list(result.schedule)


def monthly_interest_charge(balance: float, annual_rate: float) -> float:
    """First month's interest: the payment has to exceed this to make progress."""
    rate = monthly_rate(annual_rate)
    return from_cents(period_interest(max(0, to_cents(balance)), rate))


def payment_covers_interest(balance: float, annual_rate: float, payment: float) -> bool:
    rate = monthly_rate(annual_rate)
    return to_cents(payment) > period_interest(max(0, to_cents(balance)), rate)
