# barbershop/deps.py

import logging
from datetime import datetime

from fastapi import Depends, HTTPException
from sqlmodel import Session

from barbershop.backend import BackendError, QueryClient, SQLModelClient
from barbershop.db import get_session

logger = logging.getLogger(__name__)


def get_client(session: Session = Depends(get_session)) -> QueryClient:
    return SQLModelClient(session)


def backend_failure(exc: BackendError, message: str) -> HTTPException:
    """Log the backend error and turn it into a generic user-facing 502."""
    logger.error(f"Backend call failed: {exc}", exc_info=exc)
    return HTTPException(status_code=502, detail=message)


def get_now() -> datetime:
    # naive local time, same clock the appointment timestamps use
    return datetime.now()
