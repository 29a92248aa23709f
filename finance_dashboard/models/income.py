# finance_dashboard/models/income.py

from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional
from datetime import datetime, timezone
from sqlalchemy import DateTime

from finance_dashboard.models.enums import Currency

class Income(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True, unique=True)  # one active income per user
    amount: float
    currency: Currency = Field(default=Currency.USD)
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
    )
