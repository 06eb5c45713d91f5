from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Debt(BaseModel):
    """A single debt as supplied by the caller. Read-only to the engine."""
    id: Optional[str] = None
    name: Optional[str] = None
    current_balance: float = Field(allow_inf_nan=False)
    original_balance: float = Field(default=0.0, allow_inf_nan=False)
    interest_rate: float = Field(ge=0, allow_inf_nan=False)  # decimal APR, 0.20 = 20%
    minimum_payment: float = Field(allow_inf_nan=False)
    due_date: Optional[date] = None


class DebtSummary(BaseModel):
    """Portfolio totals across a user's debts."""
    total_balance: float
    total_original_balance: float
    total_minimum_payment: float
    debt_count: int
    progress: int  # whole percent paid off


class SummaryRequest(BaseModel):
    debts: list[Debt] = []
