from fastapi import Depends
from sqlmodel import SQLModel, Session, create_engine

from finance_dashboard.core.config import DATABASE_URL, SQL_ECHO
from finance_dashboard.repositories.record_store import RecordStore, SQLModelRecordStore

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)

def create_db_and_tables():
    # register table models on the metadata
    from finance_dashboard.models import expense, income, savings_goal, user  # noqa: F401
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session

def get_record_store(session: Session = Depends(get_session)) -> RecordStore:
    return SQLModelRecordStore(session)
