"""What-if scenario routes: extra payment, refinance, payment multiplier."""
from fastapi import APIRouter, HTTPException

from debtplan.models.scenario import (
    ExtraPaymentRequest,
    PaymentMultiplierRequest,
    RefinanceRequest,
    ScenarioResponse,
)
from debtplan.services.scenario_service import (
    calculate_extra_payment_scenario,
    calculate_refinance_scenario,
    to_response,
)
from debtplan.simulation.scenarios import evaluate_payment_multiplier

router = APIRouter(tags=["scenarios"])


@router.post("/scenarios/extra-payment", response_model=ScenarioResponse)
def extra_payment(request: ExtraPaymentRequest):
    """Compare the minimum payment against minimum + extra_payment."""
    try:
        return calculate_extra_payment_scenario(
            request.debt, request.extra_payment, request.start_date,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/scenarios/refinance", response_model=ScenarioResponse)
def refinance(request: RefinanceRequest):
    """Compare the current rate against new_rate at the same payment.

    Always returns a result; a higher rate simply shows negative savings.
    """
    try:
        return calculate_refinance_scenario(request.debt, request.new_rate, request.start_date)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/scenarios/payment-multiplier", response_model=ScenarioResponse)
def payment_multiplier(request: PaymentMultiplierRequest):
    try:
        result = evaluate_payment_multiplier(request.debt, request.multiplier, request.start_date)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return to_response(result)
