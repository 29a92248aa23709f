import datetime as dt
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from finance_dashboard.models.enums import Currency, ExpenseCategory

class ExpenseCreate(BaseModel):
    amount: float = Field(..., gt=0, description="Amount must be positive")
    category: ExpenseCategory
    date: dt.date
    currency: Currency = Currency.USD
    note: Optional[str] = Field(None, max_length=500)

class ExpenseRead(ExpenseCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
