"""Pydantic response models for payoff projections (amounts in currency units)."""
from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel

from debtplan.models.debt import Debt

ChartWindow = Literal[6, 12, 24, "all"]


class ScheduleEntry(BaseModel):
    """One month of the payment breakdown."""
    month: int
    principal: float
    interest: float
    payment: float
    balance: float


class CostBreakdown(BaseModel):
    principal_percent: int
    interest_percent: int


class ProjectionDisplay(BaseModel):
    """Pre-rendered strings for the debt detail screen."""
    balance: str
    total_interest: str
    payoff_date: str
    duration: str
    interest_rate: str


class CurrencyInfo(BaseModel):
    code: str
    symbol: str
    name: str
    decimals: int


class ProjectionRequest(BaseModel):
    debt: Debt
    window: ChartWindow = 12
    currency: Optional[str] = None
    start_date: Optional[date] = None


class PayoffProjection(BaseModel):
    """Baseline payoff projection for a debt at its minimum payment.

    `payoff_months`, `total_interest` and `payoff_date` are null when the
    minimum payment never pays the debt off (`converges` is false).
    """
    debt_id: Optional[str] = None
    converges: bool
    payoff_months: Optional[int] = None
    total_interest: Optional[float] = None
    payoff_date: Optional[date] = None
    monthly_interest: float
    payment_covers_interest: bool
    progress: int
    cost_breakdown: Optional[CostBreakdown] = None
    window_months: int
    schedule: list[ScheduleEntry]
    display: ProjectionDisplay
