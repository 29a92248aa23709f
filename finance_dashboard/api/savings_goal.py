from fastapi import APIRouter, Depends
from typing import Optional

from finance_dashboard.core.security import get_current_user_record
from finance_dashboard.database import get_record_store
from finance_dashboard.models.user import User
from finance_dashboard.repositories.record_store import RecordStore
from finance_dashboard.schemas.savings_goal import SavingsGoalRead, SavingsGoalUpdate

router = APIRouter(prefix="/savings-goal", tags=["savings_goal"])


@router.get("", response_model=Optional[SavingsGoalRead])
@router.get("/", response_model=Optional[SavingsGoalRead])
def get_savings_goal(
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    return store.get_savings_goal(user.id)


@router.post("", response_model=SavingsGoalRead)
@router.post("/", response_model=SavingsGoalRead)
def set_savings_goal(
    goal_data: SavingsGoalUpdate,
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    return store.upsert_savings_goal(user.id, **goal_data.model_dump())
