# finance_dashboard/api/dashboard.py

from fastapi import APIRouter, Depends, HTTPException, Query
from datetime import datetime, timezone
from typing import Optional

from finance_dashboard.core.security import get_current_user_record
from finance_dashboard.database import get_record_store
from finance_dashboard.models.enums import Currency
from finance_dashboard.models.user import User
from finance_dashboard.repositories.record_store import RecordStore
from finance_dashboard.schemas.dashboard import DashboardResponse
from finance_dashboard.utils.dashboard_helpers import build_dashboard
from finance_dashboard.utils.months import resolve_month

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
@router.get("/", response_model=DashboardResponse)
def get_dashboard(
    month: Optional[str] = Query(None, description="YYYY-MM, defaults to the current month"),
    currency: Optional[Currency] = Query(None, description="Display currency, defaults to the user's"),
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    now = datetime.now(timezone.utc)
    try:
        target_month = resolve_month(month, now.date())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return build_dashboard(store, user, target_month, now, display_currency=currency)
