import logging
from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import OAuth2PasswordRequestForm

from finance_dashboard.models.user import User
from finance_dashboard.schemas.user import CurrencyUpdate, UserCreate, UserRead
from finance_dashboard.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user_record,
)
from finance_dashboard.database import get_record_store
from finance_dashboard.repositories.record_store import RecordStore

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)

@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(user_create: UserCreate, store: RecordStore = Depends(get_record_store)):
    if store.get_user_by_email(user_create.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    return store.create_user(
        email=user_create.email,
        hashed_password=get_password_hash(user_create.password),
        currency=user_create.currency,
    )

@router.post("/login")
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    store: RecordStore = Depends(get_record_store),
):
    user = store.get_user_by_email(form_data.username)
    if not user or not verify_password(form_data.password, user.hashed_password):
        logger.info("Failed login for %s", form_data.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password")

    access_token = create_access_token(data={"sub": str(user.id)})
    return {"access_token": access_token, "token_type": "bearer"}

@router.get("/me", response_model=UserRead)
def read_users_me(user: User = Depends(get_current_user_record)):
    return user

@router.put("/currency", response_model=UserRead)
def update_currency(
    data: CurrencyUpdate,
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    return store.update_user_currency(user.id, data.currency)

# No payment provider yet: subscribing flips the premium flag.
@router.post("/subscribe", response_model=UserRead)
def subscribe(
    user: User = Depends(get_current_user_record),
    store: RecordStore = Depends(get_record_store),
):
    logger.info("User %s upgraded to premium", user.id)
    return store.update_user_premium(user.id, True)
