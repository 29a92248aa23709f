"""Shared pytest fixtures: in-memory database, record store and API client."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Ensure the repository root (which contains ``finance_dashboard``) is importable.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from finance_dashboard.database import get_session  # noqa: E402
from finance_dashboard.models import expense, income, savings_goal, user  # noqa: E402,F401
from finance_dashboard.repositories.record_store import SQLModelRecordStore  # noqa: E402


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session) -> SQLModelRecordStore:
    return SQLModelRecordStore(session)


@pytest.fixture
def client(engine):
    from fastapi.testclient import TestClient
    from finance_dashboard.main import app

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client) -> Callable[..., Dict[str, str]]:
    """Register a user and return bearer headers for it."""

    def _auth(email: str = "ana@example.com", password: str = "s3cret-pass", currency: str = "USD"):
        response = client.post(
            "/auth/register",
            json={"email": email, "password": password, "currency": currency},
        )
        assert response.status_code == 201, response.text
        token = client.post(
            "/auth/login", data={"username": email, "password": password}
        ).json()["access_token"]
        return {"Authorization": f"Bearer {token}"}

    return _auth
