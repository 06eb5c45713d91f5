"""Payoff engine: amortization loop and what-if scenarios."""
from debtplan.simulation.amortization import (
    NEVER,
    AmortizationResult,
    PaymentScheduleEntry,
    calculate_payment_schedule,
    calculate_payoff_months,
    calculate_total_interest,
    monthly_interest_charge,
    payment_covers_interest,
    preview_schedule,
    simulate,
)
from debtplan.simulation.scenarios import (
    ScenarioKind,
    ScenarioOutcome,
    ScenarioResult,
    evaluate_extra_payment,
    evaluate_payment_multiplier,
    evaluate_refinance,
)

__all__ = [
    "NEVER",
    "AmortizationResult",
    "PaymentScheduleEntry",
    "simulate",
    "calculate_payoff_months",
    "calculate_total_interest",
    "calculate_payment_schedule",
    "monthly_interest_charge",
    "payment_covers_interest",
    "preview_schedule",
    "ScenarioKind",
    "ScenarioOutcome",
    "ScenarioResult",
    "evaluate_extra_payment",
    "evaluate_refinance",
    "evaluate_payment_multiplier",
]
