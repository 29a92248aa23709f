import math
from datetime import date, datetime, time
from typing import Optional

from finance_dashboard.models.savings_goal import SavingsGoal
from finance_dashboard.schemas.dashboard import GoalProgress

DAYS_PER_MONTH = 30
DEFAULT_GOAL_NAME = "Savings Goal"


def format_deadline(deadline: date) -> str:
    return f"{deadline:%B} {deadline.day}, {deadline.year}"


def days_until(deadline: date, now: datetime) -> int:
    """Whole days from `now` to midnight of `deadline`; negative once it has passed."""
    deadline_at = datetime.combine(deadline, time.min, tzinfo=now.tzinfo)
    return math.floor((deadline_at - now).total_seconds() / 86400)


def compute_goal_progress(
    goal: Optional[SavingsGoal],
    net_savings: float,
    now: datetime,
) -> Optional[GoalProgress]:
    if goal is None:
        return None

    # Only this month's net counts as saved; no cumulative ledger is kept.
    saved = net_savings
    target = goal.target_amount

    percent_complete = min(100, max(0, math.floor(saved / target * 100)))
    days_left = days_until(goal.deadline, now)
    months_left = max(1, math.ceil(days_left / DAYS_PER_MONTH))
    monthly_savings_needed = (target - saved) / months_left

    return GoalProgress(
        description=f"{goal.name or DEFAULT_GOAL_NAME} by {format_deadline(goal.deadline)}",
        saved_amount=saved,
        target_amount=target,
        percent_complete=percent_complete,
        days_left=days_left,
        months_left=months_left,
        monthly_savings_needed=monthly_savings_needed,
        on_track=net_savings >= monthly_savings_needed,
    )
