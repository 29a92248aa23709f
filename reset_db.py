from sqlmodel import SQLModel
from finance_dashboard.database import engine
from finance_dashboard.models import expense, income, savings_goal, user  # noqa: F401

SQLModel.metadata.drop_all(engine)
SQLModel.metadata.create_all(engine)

print("Database reset: finance tables dropped and recreated.")
