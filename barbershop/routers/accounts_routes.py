# barbershop/routers/accounts_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from barbershop.db import get_session
from barbershop.models import Profile, User
from barbershop.schemas import Token, UserCreate, UserPublic
from barbershop.auth import get_current_user, hash_password, verify_password, issue_token
from barbershop.core import greeting_name

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["accounts"],
)

EMAIL_TAKEN = "Email already registered"


def find_user(session: Session, email: str):
    return session.exec(
        select(User).where(User.email == email)
    ).first()


@router.post("/users", status_code=201, response_model=UserPublic)
def register(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    # 1) Email must be free
    if find_user(session, user.email) is not None:
        raise HTTPException(status_code=409, detail=EMAIL_TAKEN)

    # 2) Account and its profile are stored together
    db_user = User(
        email=user.email,
        password_hash=hash_password(user.password),
    )
    session.add(db_user)
    try:
        session.flush()  # fills db_user.id
        session.add(Profile(user_id=db_user.id, full_name=greeting_name(db_user.email)))
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail=EMAIL_TAKEN)

    session.refresh(db_user)
    logger.info(f"Registered user {db_user.id}")
    return {"id": db_user.id, "email": db_user.email}


@router.post("/auth/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    session: Session = Depends(get_session),
):
    user = find_user(session, form_data.username)
    if user is None or not verify_password(form_data.password, user.password_hash):
        logger.warning(f"Failed login for {form_data.username}")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return {"access_token": issue_token(user), "token_type": "bearer"}


@router.get("/me", response_model=UserPublic)
def me(current_user: dict = Depends(get_current_user)):
    return {"id": current_user["id"], "email": current_user["email"]}
