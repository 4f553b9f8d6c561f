# barbershop/db.py

import logging

from sqlmodel import SQLModel, create_engine, Session

from barbershop.config import DATABASE_URL

logger = logging.getLogger(__name__)

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False  # required for SQLite + FastAPI

engine = create_engine(
    DATABASE_URL,
    echo=False,
    connect_args=connect_args,
)


def create_db_and_tables(bind=None):
    # models must be imported so their tables are registered on the metadata
    from barbershop import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logger.info("Database tables ready")


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session
