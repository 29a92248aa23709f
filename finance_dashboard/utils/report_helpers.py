from datetime import date
from html import escape
from typing import List, Optional

from finance_dashboard.models.enums import Currency
from finance_dashboard.models.expense import Expense
from finance_dashboard.schemas.dashboard import GoalProgress, MonthlySummary
from finance_dashboard.utils.currency import convert, format_amount
from finance_dashboard.utils.monthly_aggregator import percent_of


def _short_date(day: date) -> str:
    return day.strftime("%b %d, %Y")


def render_monthly_report(
    email: str,
    summary: MonthlySummary,
    expenses: List[Expense],
    progress: Optional[GoalProgress],
    working: Currency,
    display: Currency,
) -> str:
    """HTML monthly report: income, expense table, category breakdown, goal."""

    def money(amount: float) -> str:
        return format_amount(convert(amount, working, display), display)

    rows = "".join(
        f"<tr><td>{_short_date(e.date)}</td><td>{escape(str(getattr(e.category, 'value', e.category)))}</td>"
        f"<td>{money(e.amount)}</td><td>{escape(e.note or '')}</td></tr>"
        for e in expenses
    )

    breakdown = "".join(
        f"<p>{escape(category)}: {money(amount)} "
        f"({percent_of(amount, summary.total_expenses)}%)</p>"
        for category, amount in summary.expenses_by_category.items()
    )

    goal_section = ""
    if progress is not None:
        goal_section = (
            "<div class=\"section\"><h3>Savings Goal Progress</h3>"
            f"<p>Goal: {escape(progress.description)}</p>"
            f"<p>Progress: {money(progress.saved_amount)} / {money(progress.target_amount)} "
            f"({progress.percent_complete}%)</p>"
            f"<p>Days remaining: {progress.days_left}</p>"
            f"<p>Needed per month: {money(progress.monthly_savings_needed)}</p>"
            "</div>"
        )

    title = f"Monthly Finance Report - {escape(summary.month_label)}"
    return (
        "<!DOCTYPE html><html><head><meta charset=\"UTF-8\">"
        f"<title>{title}</title>"
        "<style>body{font-family:Arial,sans-serif;margin:24px;color:#333}"
        "table{width:100%;border-collapse:collapse}"
        "th,td{border-bottom:1px solid #ddd;padding:6px;text-align:left}"
        ".section{margin-top:24px}</style></head><body>"
        f"<h1>{title}</h1><p>Prepared for {escape(email)}</p>"
        "<div class=\"section\"><h3>Summary</h3>"
        f"<p>Income: {money(summary.income_amount)}</p>"
        f"<p>Total expenses: {money(summary.total_expenses)} ({summary.percent_of_income}% of income)</p>"
        f"<p>Net savings: {money(summary.net_savings)}</p></div>"
        f"<div class=\"section\"><h3>Expenses by Category</h3>{breakdown or '<p>No expenses recorded.</p>'}</div>"
        "<div class=\"section\"><h3>Expenses</h3><table>"
        "<thead><tr><th>Date</th><th>Category</th><th>Amount</th><th>Note</th></tr></thead>"
        f"<tbody>{rows}</tbody></table></div>"
        f"{goal_section}"
        "</body></html>"
    )
