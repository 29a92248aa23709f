from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from finance_dashboard.models.enums import Currency

class IncomeUpdate(BaseModel):
    amount: float = Field(..., ge=0, description="Monthly income")
    currency: Currency = Currency.USD

class IncomeRead(IncomeUpdate):
    id: int
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
