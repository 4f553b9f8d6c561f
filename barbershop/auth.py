# barbershop/auth.py

"""
Account identity for the booking screens.

Tokens name the account by id (``sub``) and carry its email for display, so
the routers get ``{"id", "email"}`` without touching the users table again
beyond one primary-key lookup.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlmodel import Session

from barbershop.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from barbershop.db import get_session
from barbershop.models import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def issue_token(user: User, expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def account_id(token: str) -> Optional[int]:
    """Account id named by a valid token, or None."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    sub = payload.get("sub")
    return int(sub) if isinstance(sub, str) and sub.isdigit() else None


def get_current_user(
    token: str = Depends(oauth2_scheme),
    session: Session = Depends(get_session),
) -> dict:
    user_id = account_id(token)
    user = session.get(User, user_id) if user_id is not None else None
    if user is None:
        raise HTTPException(
            status_code=401,
            detail="Sessão inválida ou expirada",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return {"id": user.id, "email": user.email}
