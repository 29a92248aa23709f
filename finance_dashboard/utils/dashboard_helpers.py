import logging
from datetime import datetime
from typing import List, NamedTuple, Optional

from finance_dashboard.models.enums import Currency
from finance_dashboard.models.expense import Expense
from finance_dashboard.models.income import Income
from finance_dashboard.models.user import User
from finance_dashboard.repositories.record_store import RecordStore
from finance_dashboard.schemas.dashboard import (
    DashboardResponse,
    ExpensesBlock,
    GoalProgress,
    HighestCategory,
    IncomeBlock,
    MonthlySummary,
    SavingsBlock,
)
from finance_dashboard.utils.currency import convert, format_amount
from finance_dashboard.utils.goal_pacing import compute_goal_progress
from finance_dashboard.utils.monthly_aggregator import aggregate_month
from finance_dashboard.utils.months import YearMonth

logger = logging.getLogger(__name__)


class MonthRecords(NamedTuple):
    income: Optional[Income]
    expenses: List[Expense]
    summary: MonthlySummary
    progress: Optional[GoalProgress]
    working: Currency


def load_month(store: RecordStore, user: User, target_month: YearMonth, now: datetime) -> MonthRecords:
    """Fetch a user's records for `target_month` and run aggregation and pacing.

    The working currency is the income's currency, or the user's preference
    when no income is recorded.
    """
    income = store.get_income(user.id)
    current_expenses = store.get_expenses(user.id, target_month)
    previous_expenses = store.get_expenses(user.id, target_month.previous())
    goal = store.get_savings_goal(user.id)

    summary = aggregate_month(income, current_expenses, previous_expenses, target_month)
    progress = compute_goal_progress(goal, summary.net_savings, now)
    working = Currency(income.currency) if income else Currency(user.currency)
    return MonthRecords(income, current_expenses, summary, progress, working)


def build_dashboard(
    store: RecordStore,
    user: User,
    target_month: YearMonth,
    now: datetime,
    display_currency: Optional[Currency] = None,
) -> DashboardResponse:
    """Dashboard payload for `target_month`, converted to `display_currency` at the end."""
    records = load_month(store, user, target_month, now)
    display = Currency(display_currency or user.currency)

    logger.info(
        "Dashboard for user %s month %s: %d expenses, working=%s display=%s",
        user.id, target_month, len(records.expenses), records.working.value, display.value,
    )
    return present_dashboard(
        records.summary,
        records.progress,
        income_updated_at=records.income.updated_at if records.income else None,
        working=records.working,
        display=display,
    )


def present_dashboard(
    summary: MonthlySummary,
    progress: Optional[GoalProgress],
    income_updated_at: Optional[datetime],
    working: Currency,
    display: Currency,
) -> DashboardResponse:
    def money(amount: float) -> float:
        return convert(amount, working, display)

    by_category = {category: money(amount) for category, amount in summary.expenses_by_category.items()}

    goal = None
    if progress is not None:
        goal = progress.model_copy(update={
            "saved_amount": money(progress.saved_amount),
            "target_amount": money(progress.target_amount),
            "monthly_savings_needed": money(progress.monthly_savings_needed),
        })

    net_savings = money(summary.net_savings)
    formatted = {
        "income": format_amount(money(summary.income_amount), display),
        "total_expenses": format_amount(money(summary.total_expenses), display),
        "highest_amount": format_amount(money(summary.highest_amount), display),
        "net_savings": format_amount(net_savings, display),
        "savings_trend": format_amount(money(summary.savings_trend), display),
    }
    if goal is not None:
        formatted["goal_saved"] = format_amount(goal.saved_amount, display)
        formatted["goal_target"] = format_amount(goal.target_amount, display)
        formatted["monthly_savings_needed"] = format_amount(goal.monthly_savings_needed, display)

    return DashboardResponse(
        month=summary.month_label,
        working_currency=working,
        currency=display,
        income=IncomeBlock(amount=money(summary.income_amount), updated_at=income_updated_at),
        expenses=ExpensesBlock(
            total=money(summary.total_expenses),
            percent_of_income=summary.percent_of_income,
            categories_count=len(by_category),
            highest=HighestCategory(
                category=summary.highest_category,
                amount=money(summary.highest_amount),
            ),
            by_category=by_category,
        ),
        savings=SavingsBlock(
            amount=net_savings,
            percent_of_income=summary.savings_percent_of_income,
            trend=money(summary.savings_trend),
            # single month of history, so the average is this month's net
            monthly_average=net_savings,
        ),
        goal=goal,
        formatted=formatted,
    )
