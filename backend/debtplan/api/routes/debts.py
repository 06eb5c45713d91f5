"""Debt projection and portfolio summary routes."""
from fastapi import APIRouter, HTTPException

from debtplan.errors import UnknownCurrency
from debtplan.models.debt import DebtSummary, SummaryRequest
from debtplan.models.schedule import PayoffProjection, ProjectionRequest
from debtplan.services.debt_service import build_projection, summarize_debts

router = APIRouter(tags=["debts"])


@router.post("/debts/projection", response_model=PayoffProjection)
def project_debt(request: ProjectionRequest):
    """Payoff months, total interest, payoff date and payment breakdown at the minimum payment."""
    try:
        return build_projection(
            request.debt,
            window=request.window,
            currency=request.currency,
            today=request.start_date,
        )
    except (UnknownCurrency, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/debts/summary", response_model=DebtSummary)
def summarize(request: SummaryRequest):
    return summarize_debts(request.debts)
