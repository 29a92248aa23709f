# finance_dashboard/routes/fx.py
from fastapi import APIRouter, Query

from finance_dashboard.models.enums import Currency
from finance_dashboard.utils.currency import currency_options, rate

router = APIRouter(prefix="/fx", tags=["fx"])

@router.get("/rate")
def get_rate(from_: Currency = Query(..., alias="from"), to: Currency = Query(...)):
    if from_ == to:
        return {"from": from_, "to": to, "rate": 1.0, "source": "identity"}
    return {"from": from_, "to": to, "rate": rate(from_, to), "source": "table"}

@router.get("/currencies")
def list_currencies():
    return currency_options()
