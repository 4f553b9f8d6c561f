# barbershop/routers/dashboard_routes.py

from datetime import datetime

from fastapi import APIRouter, Depends

from barbershop.auth import get_current_user
from barbershop.backend import BackendError, QueryClient
from barbershop.core import (
    SERVICE_NOT_FOUND,
    count_pending,
    format_long_datetime,
    format_price,
    greeting_name,
    next_appointment,
)
from barbershop.deps import backend_failure, get_client, get_now
from barbershop.schemas import DashboardStats

router = APIRouter(
    tags=["dashboard"],
)


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(
    client: QueryClient = Depends(get_client),
    current_user: dict = Depends(get_current_user),
    now: datetime = Depends(get_now),
):
    try:
        appts = client.select(
            "appointments",
            filters={"user_id": current_user["id"]},
            order_by="appointment_date",
            embed={"service": ("service_id", "services")},
        )
    except BackendError as e:
        raise backend_failure(e, "Não foi possível carregar os dados do dashboard")

    upcoming = next_appointment(appts, now)
    next_info = None
    if upcoming is not None:
        service = upcoming.get("service") or {}
        when = upcoming["appointment_date"]
        next_info = {
            "id": upcoming["id"],
            "appointment_date": when,
            "status": upcoming["status"],
            "service_name": service.get("name", SERVICE_NOT_FOUND),
            "price_display": format_price(service.get("price", 0)),
            "date_display": format_long_datetime(when),
        }

    return {
        "greeting_name": greeting_name(current_user["email"]),
        "total_appointments": len(appts),
        "pending_appointments": count_pending(appts),
        "next_appointment": next_info,
    }
