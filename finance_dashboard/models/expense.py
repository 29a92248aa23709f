# finance_dashboard/models/expense.py

import datetime as dt
from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional

from finance_dashboard.models.enums import Currency, ExpenseCategory

class Expense(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    amount: float
    category: ExpenseCategory
    date: dt.date = Field(index=True)
    currency: Currency = Field(default=Currency.USD)
    note: Optional[str] = None
