# finance_dashboard/repositories/record_store.py

import logging
from datetime import datetime, timezone
from typing import List, Optional, Protocol
from uuid import UUID

from sqlmodel import Session, select

from finance_dashboard.models.enums import Currency
from finance_dashboard.models.expense import Expense
from finance_dashboard.models.income import Income
from finance_dashboard.models.savings_goal import SavingsGoal
from finance_dashboard.models.user import User
from finance_dashboard.utils.months import YearMonth

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """Raised when a record is missing or belongs to another user."""


class RecordStore(Protocol):
    """Per-user access to the records the dashboard is computed from."""

    def get_user(self, user_id: UUID) -> Optional[User]: ...
    def get_user_by_email(self, email: str) -> Optional[User]: ...
    def create_user(self, email: str, hashed_password: str, currency: Currency) -> User: ...
    def update_user_currency(self, user_id: UUID, currency: Currency) -> User: ...
    def update_user_premium(self, user_id: UUID, is_premium: bool) -> User: ...

    def get_income(self, user_id: UUID) -> Optional[Income]: ...
    def upsert_income(self, user_id: UUID, amount: float, currency: Currency) -> Income: ...

    def get_expenses(self, user_id: UUID, month: Optional[YearMonth] = None) -> List[Expense]: ...
    def get_expense(self, user_id: UUID, expense_id: int) -> Expense: ...
    def create_expense(self, user_id: UUID, **fields) -> Expense: ...
    def update_expense(self, user_id: UUID, expense_id: int, **fields) -> Expense: ...
    def delete_expense(self, user_id: UUID, expense_id: int) -> None: ...

    def get_savings_goal(self, user_id: UUID) -> Optional[SavingsGoal]: ...
    def upsert_savings_goal(self, user_id: UUID, **fields) -> SavingsGoal: ...


class SQLModelRecordStore:
    """RecordStore backed by a SQLModel session."""

    def __init__(self, session: Session):
        self.session = session

    def _save(self, record):
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    # Users
    def get_user(self, user_id: UUID) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(
            select(User).where(User.email == email.lower())
        ).first()

    def create_user(self, email: str, hashed_password: str, currency: Currency = Currency.USD) -> User:
        user = self._save(User(email=email.lower(), hashed_password=hashed_password, currency=currency))
        logger.info("Created user %s", user.id)
        return user

    def _require_user(self, user_id: UUID) -> User:
        user = self.get_user(user_id)
        if not user:
            raise RecordNotFoundError("User not found")
        return user

    def update_user_currency(self, user_id: UUID, currency: Currency) -> User:
        user = self._require_user(user_id)
        user.currency = currency
        return self._save(user)

    def update_user_premium(self, user_id: UUID, is_premium: bool) -> User:
        user = self._require_user(user_id)
        user.is_premium = is_premium
        return self._save(user)

    # Income
    def get_income(self, user_id: UUID) -> Optional[Income]:
        return self.session.exec(
            select(Income).where(Income.user_id == user_id)
        ).first()

    def upsert_income(self, user_id: UUID, amount: float, currency: Currency) -> Income:
        income = self.get_income(user_id)
        if income is None:
            income = Income(user_id=user_id, amount=amount, currency=currency)
        else:
            income.amount = amount
            income.currency = currency
            income.updated_at = datetime.now(timezone.utc)
        return self._save(income)

    # Expenses
    def get_expenses(self, user_id: UUID, month: Optional[YearMonth] = None) -> List[Expense]:
        query = select(Expense).where(Expense.user_id == user_id)
        if month is not None:
            start, end = month.bounds()
            query = query.where(Expense.date >= start, Expense.date < end)
        return list(self.session.exec(query.order_by(Expense.date, Expense.id)).all())

    def get_expense(self, user_id: UUID, expense_id: int) -> Expense:
        expense = self.session.get(Expense, expense_id)
        if not expense or expense.user_id != user_id:
            raise RecordNotFoundError("Expense not found")
        return expense

    def create_expense(self, user_id: UUID, **fields) -> Expense:
        expense = self._save(Expense(user_id=user_id, **fields))
        logger.debug("User %s added expense %s", user_id, expense.id)
        return expense

    def update_expense(self, user_id: UUID, expense_id: int, **fields) -> Expense:
        expense = self.get_expense(user_id, expense_id)
        for key, value in fields.items():
            setattr(expense, key, value)
        return self._save(expense)

    def delete_expense(self, user_id: UUID, expense_id: int) -> None:
        expense = self.get_expense(user_id, expense_id)
        self.session.delete(expense)
        self.session.commit()
        logger.debug("User %s deleted expense %s", user_id, expense_id)

    # Savings goal
    def get_savings_goal(self, user_id: UUID) -> Optional[SavingsGoal]:
        return self.session.exec(
            select(SavingsGoal).where(SavingsGoal.user_id == user_id)
        ).first()

    def upsert_savings_goal(self, user_id: UUID, **fields) -> SavingsGoal:
        goal = self.get_savings_goal(user_id)
        if goal is None:
            goal = SavingsGoal(user_id=user_id, **fields)
        else:
            for key, value in fields.items():
                setattr(goal, key, value)
        return self._save(goal)
