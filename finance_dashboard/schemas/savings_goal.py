from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from finance_dashboard.models.enums import Currency

class SavingsGoalUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=120)
    target_amount: float = Field(..., gt=0, description="Target amount must be positive")
    deadline: date
    currency: Currency = Currency.USD

class SavingsGoalRead(SavingsGoalUpdate):
    id: int

    model_config = ConfigDict(from_attributes=True)
