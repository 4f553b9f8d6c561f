# barbershop/routers/appointments_routes.py

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from barbershop.auth import get_current_user
from barbershop.backend import BackendError, QueryClient
from barbershop.core import (
    SERVICE_NOT_FOUND,
    can_cancel,
    can_reschedule,
    compose_datetime,
    format_duration,
    format_long_date,
    format_price,
    generate_time_slots,
    is_in_future,
    status_color,
    status_label,
)
from barbershop.deps import backend_failure, get_client, get_now
from barbershop.schemas import (
    AppointmentCreate,
    AppointmentPublic,
    AppointmentStatus,
    TimeSlotsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/appointments",
    tags=["appointments"],
)

SERVICE_EMBED = {"service": ("service_id", "services")}


def service_summary(service: Optional[dict]) -> dict:
    if service is None:
        return {"name": SERVICE_NOT_FOUND, "description": "", "price": 0, "duration": 0}
    return {
        "name": service["name"],
        "description": service.get("description") or "",
        "price": service["price"],
        "duration": service["duration"],
    }


def to_public(a: dict, service: Optional[dict], now: datetime) -> dict:
    summary = service_summary(service)
    when = a["appointment_date"]
    return {
        "id": a["id"],
        "service_id": a["service_id"],
        "appointment_date": when,
        "notes": a.get("notes"),
        "status": a["status"],
        "status_label": status_label(a["status"]),
        "status_color": status_color(a["status"]),
        "service": summary,
        "date_display": format_long_date(when),
        "time_display": when.strftime("%H:%M"),
        "price_display": format_price(summary["price"]),
        "duration_display": format_duration(summary["duration"]),
        "can_cancel": can_cancel(a["status"], when, now),
        "can_reschedule": can_reschedule(a["status"]),
    }


@router.get("/time-slots", response_model=TimeSlotsResponse)
def time_slots():
    return {"slots": generate_time_slots()}


@router.post("", response_model=AppointmentPublic, status_code=201)
def book_appointment(
    appt: AppointmentCreate,
    client: QueryClient = Depends(get_client),
    current_user: dict = Depends(get_current_user),
    now: datetime = Depends(get_now),
):
    # 1) Validate slot
    if appt.appointment_time not in generate_time_slots():
        raise HTTPException(status_code=422, detail="Horário inválido")

    # 2) Prevent booking in the past (naive local time)
    appointment_date = compose_datetime(appt.appointment_date, appt.appointment_time)
    if not is_in_future(appointment_date, now):
        raise HTTPException(status_code=422, detail="A data do agendamento deve ser no futuro")

    error_message = "Não foi possível realizar o agendamento"

    # 3) Only services offered in the catalogue can be booked
    try:
        found = client.select("services", filters={"id": appt.service_id, "is_active": True})
    except BackendError as e:
        raise backend_failure(e, error_message)
    if not found:
        raise HTTPException(status_code=422, detail="Serviço indisponível para agendamento")
    service = found[0]

    # 4) Create pending appointment
    notes = appt.notes.strip() if appt.notes else ""
    try:
        created = client.insert(
            "appointments",
            {
                "user_id": current_user["id"],
                "service_id": appt.service_id,
                "appointment_date": appointment_date,
                "notes": notes or None,
                "status": AppointmentStatus.pending.value,
            },
        )
    except BackendError as e:
        raise backend_failure(e, error_message)

    logger.info(f"Appointment {created['id']} booked by user {current_user['id']} for {appointment_date}")
    return to_public(created, service, now)


@router.get("", response_model=List[AppointmentPublic])
def list_my_appointments(
    client: QueryClient = Depends(get_client),
    current_user: dict = Depends(get_current_user),
    now: datetime = Depends(get_now),
):
    try:
        appts = client.select(
            "appointments",
            filters={"user_id": current_user["id"]},
            order_by="appointment_date",
            embed=SERVICE_EMBED,
        )
    except BackendError as e:
        raise backend_failure(e, "Não foi possível carregar os agendamentos")

    return [to_public(a, a.get("service"), now) for a in appts]


@router.patch("/{appt_id}/cancel", response_model=AppointmentPublic)
def cancel_appointment(
    appt_id: int,
    client: QueryClient = Depends(get_client),
    current_user: dict = Depends(get_current_user),
    now: datetime = Depends(get_now),
):
    error_message = "Não foi possível cancelar o agendamento"
    owner_filter = {"id": appt_id, "user_id": current_user["id"]}

    # 1) Find the appointment among the caller's own
    try:
        found = client.select("appointments", filters=owner_filter, embed=SERVICE_EMBED)
    except BackendError as e:
        raise backend_failure(e, error_message)
    if not found:
        raise HTTPException(status_code=404, detail="Agendamento não encontrado")
    target = found[0]

    # 2) Only pending and outside the cancellation window
    if not can_cancel(target["status"], target["appointment_date"], now):
        raise HTTPException(status_code=409, detail="Este agendamento não pode mais ser cancelado")

    # 3) Cancel, restricted by id and owner
    try:
        updated = client.update(
            "appointments",
            {"status": AppointmentStatus.cancelled.value},
            filters=owner_filter,
        )
    except BackendError as e:
        raise backend_failure(e, error_message)
    if not updated:
        raise HTTPException(status_code=404, detail="Agendamento não encontrado")

    logger.info(f"Appointment {appt_id} cancelled by user {current_user['id']}")
    return to_public(updated[0], target.get("service"), now)
