import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
from datetime import datetime, timezone
from typing import Optional

from finance_dashboard.core.security import get_current_premium_user
from finance_dashboard.database import get_record_store
from finance_dashboard.models.enums import Currency
from finance_dashboard.models.user import User
from finance_dashboard.repositories.record_store import RecordStore
from finance_dashboard.utils.dashboard_helpers import load_month
from finance_dashboard.utils.months import resolve_month
from finance_dashboard.utils.report_helpers import render_monthly_report

router = APIRouter(prefix="/export", tags=["export"])

logger = logging.getLogger(__name__)


@router.get("/report", response_class=HTMLResponse)
def export_monthly_report(
    month: Optional[str] = Query(None, description="YYYY-MM, defaults to the current month"),
    user: User = Depends(get_current_premium_user),
    store: RecordStore = Depends(get_record_store),
):
    now = datetime.now(timezone.utc)
    try:
        target_month = resolve_month(month, now.date())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    records = load_month(store, user, target_month, now)
    logger.info("Exporting report for user %s month %s", user.id, target_month)
    return render_monthly_report(
        email=user.email,
        summary=records.summary,
        expenses=records.expenses,
        progress=records.progress,
        working=records.working,
        display=Currency(user.currency),
    )
