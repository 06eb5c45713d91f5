"""Supported display currencies."""
from fastapi import APIRouter

from debtplan.formatting import list_currencies
from debtplan.models.schedule import CurrencyInfo

router = APIRouter(tags=["currencies"])


@router.get("/currencies", response_model=list[CurrencyInfo])
def get_currencies():
    return [
        CurrencyInfo(code=c.code, symbol=c.symbol, name=c.name, decimals=c.decimals)
        for c in list_currencies()
    ]
