# finance_dashboard/api/expenses.py

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional

from finance_dashboard.core.security import get_current_user_record
from finance_dashboard.database import get_record_store
from finance_dashboard.models.user import User
from finance_dashboard.repositories.record_store import RecordStore
from finance_dashboard.schemas.expense import ExpenseCreate, ExpenseRead
from finance_dashboard.utils.months import YearMonth

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseRead])
@router.get("/", response_model=List[ExpenseRead])
def list_expenses(
    month: Optional[str] = Query(None, description="YYYY-MM; all expenses when omitted"),
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    target = None
    if month:
        try:
            target = YearMonth.parse(month)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    return store.get_expenses(user.id, target)


@router.post("", response_model=ExpenseRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ExpenseRead, status_code=status.HTTP_201_CREATED)
def create_expense(
    expense_data: ExpenseCreate,
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    return store.create_expense(user.id, **expense_data.model_dump())


@router.put("/{expense_id}", response_model=ExpenseRead)
def update_expense(
    expense_id: int,
    expense_data: ExpenseCreate,
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    # RecordNotFoundError -> 404 via the app exception handler
    return store.update_expense(user.id, expense_id, **expense_data.model_dump())


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(
    expense_id: int,
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    store.delete_expense(user.id, expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
