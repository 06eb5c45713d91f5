"""Pydantic request/response models for what-if scenarios."""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from debtplan.models.debt import Debt


class ExtraPaymentRequest(BaseModel):
    debt: Debt
    extra_payment: float = Field(ge=0, allow_inf_nan=False)
    start_date: Optional[date] = None


class RefinanceRequest(BaseModel):
    debt: Debt
    new_rate: float = Field(ge=0, allow_inf_nan=False)
    start_date: Optional[date] = None


class PaymentMultiplierRequest(BaseModel):
    debt: Debt
    multiplier: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    start_date: Optional[date] = None


class RunSummary(BaseModel):
    """Summary of one amortization run; null values mean it never pays off."""
    payment: float
    interest_rate: float
    converges: bool
    payoff_months: Optional[int] = None
    total_interest: Optional[float] = None


class ScenarioResponse(BaseModel):
    """Baseline vs. modified comparison.

    `months_saved` and `total_interest_saved` are only set when `outcome` is
    "comparable"; otherwise one side never pays off and a finite delta does
    not exist.
    """
    kind: str
    outcome: str
    baseline: RunSummary
    scenario: RunSummary
    new_payoff_date: Optional[date] = None
    months_saved: Optional[int] = None
    total_interest_saved: Optional[float] = None
