import math
from typing import Dict, Iterable, Optional

from finance_dashboard.models.expense import Expense
from finance_dashboard.models.income import Income
from finance_dashboard.schemas.dashboard import MonthlySummary
from finance_dashboard.utils.months import YearMonth


def _category_key(category) -> str:
    return getattr(category, "value", category)


def group_by_category(expenses: Iterable[Expense]) -> Dict[str, float]:
    """Sum amounts per category, keeping first-encountered order."""
    totals: Dict[str, float] = {}
    for expense in expenses:
        key = _category_key(expense.category)
        totals[key] = totals.get(key, 0.0) + expense.amount
    return totals


def percent_of(part: float, whole: float) -> int:
    # half-up, so 50.5 shows as 51
    return math.floor(part * 100 / whole + 0.5) if whole > 0 else 0


def aggregate_month(
    income: Optional[Income],
    current_expenses: Iterable[Expense],
    previous_expenses: Iterable[Expense],
    target_month: YearMonth,
) -> MonthlySummary:
    """Derive the monthly dashboard figures for one user.

    Both months are measured against the current income: income history is
    not kept, so the previous month's net savings reuses today's figure.
    Missing income or an empty month degrade to zeros, never to an error.
    """
    current_expenses = list(current_expenses)
    income_amount = income.amount if income else 0.0

    by_category = group_by_category(current_expenses)
    # summed from the groups so the categories add up to the total exactly
    total_expenses = sum(by_category.values())
    previous_total = sum(e.amount for e in previous_expenses)

    net_savings = income_amount - total_expenses
    previous_net_savings = income_amount - previous_total

    highest_category = ""
    highest_amount = 0.0
    for category, amount in by_category.items():
        # strict comparison keeps the first category on ties
        if amount > highest_amount:
            highest_category = category
            highest_amount = amount

    return MonthlySummary(
        month_label=target_month.label,
        income_amount=income_amount,
        total_expenses=total_expenses,
        percent_of_income=percent_of(total_expenses, income_amount),
        expenses_by_category=by_category,
        highest_category=highest_category,
        highest_amount=highest_amount,
        net_savings=net_savings,
        savings_percent_of_income=percent_of(net_savings, income_amount),
        savings_trend=net_savings - previous_net_savings,
    )
