# barbershop/backend.py

"""
Generic query client over the booking tables.

Screens never touch SQL directly: they ask a ``QueryClient`` for records by
table name with equality filters, an optional ordering and optional embedded
foreign rows, and they mutate with ``insert`` and ``update``. Any storage
failure surfaces as ``BackendError``.
"""

import logging
from typing import Dict, List, Optional, Protocol, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from barbershop.models import Appointment, Profile, Service

logger = logging.getLogger(__name__)

TABLES: Dict[str, type] = {
    "services": Service,
    "appointments": Appointment,
    "profiles": Profile,
}

# output key -> (foreign key column, referenced table)
Embed = Dict[str, Tuple[str, str]]


class BackendError(Exception):
    """A query or mutation against the backend failed."""


class QueryClient(Protocol):
    def select(
        self,
        table: str,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
        embed: Optional[Embed] = None,
    ) -> List[dict]: ...

    def insert(self, table: str, record: dict) -> dict: ...

    def update(self, table: str, values: dict, filters: dict) -> List[dict]: ...


def _model(table: str) -> type:
    try:
        return TABLES[table]
    except KeyError:
        raise BackendError(f"Unknown table: {table}")


def _column(model: type, name: str):
    if name not in model.model_fields:
        raise BackendError(f"Unknown column: {model.__tablename__}.{name}")
    return getattr(model, name)


class SQLModelClient:
    def __init__(self, session: Session):
        self.session = session

    def select(self, table, filters=None, order_by=None, ascending=True, embed=None):
        model = _model(table)
        stmt = select(model)
        for key, value in (filters or {}).items():
            stmt = stmt.where(_column(model, key) == value)
        if order_by is not None:
            col = _column(model, order_by)
            stmt = stmt.order_by(col if ascending else col.desc())

        try:
            rows = self.session.exec(stmt).all()
            records = [row.model_dump() for row in rows]
            for key, (fk, other) in (embed or {}).items():
                other_model = _model(other)
                for rec in records:
                    ref = self.session.get(other_model, rec.get(fk)) if rec.get(fk) is not None else None
                    rec[key] = ref.model_dump() if ref is not None else None
        except SQLAlchemyError as e:
            logger.error(f"select on {table} failed: {e}")
            raise BackendError(str(e)) from e
        return records

    def insert(self, table, record):
        model = _model(table)
        for key in record:
            _column(model, key)
        obj = model(**record)
        self.session.add(obj)
        try:
            self.session.commit()
            self.session.refresh(obj)  # fills obj.id
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"insert into {table} failed: {e}")
            raise BackendError(str(e)) from e
        return obj.model_dump()

    def update(self, table, values, filters):
        model = _model(table)
        for key in values:
            _column(model, key)
        stmt = select(model)
        for key, value in filters.items():
            stmt = stmt.where(_column(model, key) == value)

        try:
            rows = self.session.exec(stmt).all()
            for row in rows:
                for key, value in values.items():
                    setattr(row, key, value)
                self.session.add(row)
            self.session.commit()
            for row in rows:
                self.session.refresh(row)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"update on {table} failed: {e}")
            raise BackendError(str(e)) from e
        return [row.model_dump() for row in rows]
