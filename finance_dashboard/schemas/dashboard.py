# finance_dashboard/schemas/dashboard.py

from pydantic import BaseModel, ConfigDict
from typing import Dict, Optional
from datetime import datetime

from finance_dashboard.models.enums import Currency


class MonthlySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    month_label: str
    income_amount: float
    total_expenses: float
    percent_of_income: int
    expenses_by_category: Dict[str, float]
    highest_category: str
    highest_amount: float
    net_savings: float
    savings_percent_of_income: int
    savings_trend: float


class GoalProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    saved_amount: float
    target_amount: float
    percent_complete: int
    days_left: int
    months_left: int
    monthly_savings_needed: float
    on_track: bool


class IncomeBlock(BaseModel):
    amount: float
    updated_at: Optional[datetime] = None


class HighestCategory(BaseModel):
    category: str
    amount: float


class ExpensesBlock(BaseModel):
    total: float
    percent_of_income: int
    categories_count: int
    highest: HighestCategory
    by_category: Dict[str, float]


class SavingsBlock(BaseModel):
    amount: float
    percent_of_income: int
    trend: float
    monthly_average: float


class DashboardResponse(BaseModel):
    month: str
    working_currency: Currency
    currency: Currency  # display currency of every amount below
    income: IncomeBlock
    expenses: ExpensesBlock
    savings: SavingsBlock
    goal: Optional[GoalProgress] = None
    formatted: Dict[str, str]
