from fastapi import APIRouter

from debtplan import __version__
from debtplan.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "version": __version__,
        "iteration_cap": settings.MAX_AMORTIZATION_MONTHS,
    }
