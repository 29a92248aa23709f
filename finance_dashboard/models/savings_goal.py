# finance_dashboard/models/savings_goal.py

from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional
from datetime import date

from finance_dashboard.models.enums import Currency

class SavingsGoal(SQLModel, table=True):
    __tablename__ = "savings_goal"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True, unique=True)
    name: Optional[str] = None  # e.g. "Emergency fund"
    target_amount: float
    deadline: date
    currency: Currency = Field(default=Currency.USD)
