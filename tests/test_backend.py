from datetime import datetime
from decimal import Decimal

import pytest
from sqlmodel import SQLModel

from barbershop.backend import BackendError, SQLModelClient
from barbershop.models import Appointment, Profile, Service


@pytest.fixture
def client(session):
    session.add(Service(id=1, name="Haircut", description="Classic cut", price=Decimal("50.00"), duration=30))
    session.add(Service(id=2, name="Beard", price=Decimal("35.00"), duration=30, is_active=False))
    session.add(Appointment(id=1, user_id=1, service_id=1, appointment_date=datetime(2025, 3, 12, 10, 0)))
    session.add(Appointment(id=2, user_id=1, service_id=99, appointment_date=datetime(2025, 3, 11, 8, 0)))
    session.add(Appointment(id=3, user_id=2, service_id=1, appointment_date=datetime(2025, 3, 11, 9, 0)))
    session.add(Profile(id=1, user_id=1, full_name="João"))
    session.commit()
    return SQLModelClient(session)


def test_select_filters_by_equality(client):
    rows = client.select("services", filters={"is_active": True})
    assert [r["name"] for r in rows] == ["Haircut"]
    assert rows[0]["price"] == Decimal("50.00")


def test_select_orders(client):
    rows = client.select("appointments", filters={"user_id": 1}, order_by="appointment_date")
    assert [r["id"] for r in rows] == [2, 1]

    rows = client.select("appointments", order_by="appointment_date", ascending=False)
    assert [r["id"] for r in rows] == [1, 3, 2]


def test_select_embeds_foreign_rows(client):
    rows = client.select(
        "appointments",
        filters={"user_id": 1},
        order_by="appointment_date",
        embed={"service": ("service_id", "services")},
    )
    assert rows[0]["service"] is None  # dangling reference
    assert rows[1]["service"]["name"] == "Haircut"


def test_insert_returns_record_with_id(client):
    created = client.insert(
        "appointments",
        {"user_id": 1, "service_id": 1, "appointment_date": datetime(2025, 4, 1, 8, 30), "notes": None, "status": "pending"},
    )
    assert created["id"] is not None
    assert created["status"] == "pending"
    assert len(client.select("appointments", filters={"user_id": 1})) == 3


def test_update_by_filter(client):
    updated = client.update("appointments", {"status": "cancelled"}, filters={"id": 1, "user_id": 1})
    assert [r["status"] for r in updated] == ["cancelled"]
    assert client.select("appointments", filters={"id": 1})[0]["status"] == "cancelled"


def test_update_respects_owner_filter(client):
    assert client.update("appointments", {"status": "cancelled"}, filters={"id": 3, "user_id": 1}) == []
    assert client.select("appointments", filters={"id": 3})[0]["status"] == "pending"


def test_unknown_table(client):
    with pytest.raises(BackendError):
        client.select("barbers")


def test_unknown_column(client):
    with pytest.raises(BackendError):
        client.select("services", filters={"title": "Haircut"})
    with pytest.raises(BackendError):
        client.update("profiles", {"email": "x@example.com"}, filters={"user_id": 1})


def test_storage_errors_become_backend_errors(client, engine):
    SQLModel.metadata.drop_all(engine)
    with pytest.raises(BackendError):
        client.select("services")
