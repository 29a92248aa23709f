from fastapi import APIRouter, Depends
from typing import Optional

from finance_dashboard.core.security import get_current_user_record
from finance_dashboard.database import get_record_store
from finance_dashboard.models.user import User
from finance_dashboard.repositories.record_store import RecordStore
from finance_dashboard.schemas.income import IncomeRead, IncomeUpdate

router = APIRouter(prefix="/income", tags=["income"])


@router.get("", response_model=Optional[IncomeRead])
@router.get("/", response_model=Optional[IncomeRead])
def get_income(
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    return store.get_income(user.id)


@router.post("", response_model=IncomeRead)
@router.post("/", response_model=IncomeRead)
def set_income(
    income_data: IncomeUpdate,
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    return store.upsert_income(user.id, income_data.amount, income_data.currency)
