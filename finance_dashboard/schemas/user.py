from pydantic import BaseModel, ConfigDict, EmailStr, Field
from uuid import UUID

from finance_dashboard.models.enums import Currency

class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, description="At least 8 characters")
    currency: Currency = Currency.USD

class UserRead(BaseModel):
    id: UUID
    email: EmailStr
    currency: Currency
    is_premium: bool

    model_config = ConfigDict(from_attributes=True)

class CurrencyUpdate(BaseModel):
    currency: Currency
