import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("SEED_DEFAULT_SERVICES", "false")

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from barbershop.auth import get_current_user
from barbershop.db import create_db_and_tables, get_session
from barbershop.deps import get_client, get_now
from barbershop.main import app

from fakes import FailingClient, MemoryClient

NOW = datetime(2025, 3, 10, 9, 0)
USER = {"id": 1, "email": "joao.silva@example.com"}


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def user():
    return dict(USER)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    return engine


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def memory_client():
    return MemoryClient(
        services=[
            {"id": 1, "name": "Haircut", "description": "Classic cut", "price": Decimal("50.00"), "duration": 30, "is_active": True},
            {"id": 2, "name": "Beard", "description": "Hot towel trim", "price": Decimal("35.00"), "duration": 90, "is_active": True},
            {"id": 3, "name": "Coloring", "description": "Retired", "price": Decimal("120.00"), "duration": 60, "is_active": False},
        ],
        profiles=[
            {"id": 10, "user_id": 1, "full_name": "João Silva", "phone": None, "avatar_url": None},
        ],
    )


@pytest.fixture
def failing_client():
    return FailingClient()


def _test_client(session, client, user):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[get_now] = lambda: NOW
    if client is not None:
        app.dependency_overrides[get_client] = lambda: client
    return TestClient(app)


@pytest.fixture
def api(session, memory_client, user):
    yield _test_client(session, memory_client, user)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_api(session, failing_client, user):
    yield _test_client(session, failing_client, user)
    app.dependency_overrides.clear()


@pytest.fixture
def db_api(session, user):
    """Routes backed by the SQLModel client over an in-memory SQLite database."""
    yield _test_client(session, None, user)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_api(session):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_now] = lambda: NOW
    yield TestClient(app)
    app.dependency_overrides.clear()
