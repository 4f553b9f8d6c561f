# barbershop/core.py

"""
Booking rules shared by the routers: time slots, cancellation window,
status presentation, price/duration/date formatting and the dashboard
summary. Everything here is pure; "now" is passed in by the caller.
"""

from datetime import datetime, timedelta, date, time
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from babel.dates import format_date, format_datetime

from barbershop.data import shop_settings
from barbershop.schemas import AppointmentStatus

STATUS_LABELS = {
    AppointmentStatus.pending: "Pendente",
    AppointmentStatus.confirmed: "Confirmado",
    AppointmentStatus.cancelled: "Cancelado",
    AppointmentStatus.completed: "Concluído",
}

STATUS_COLORS = {
    AppointmentStatus.pending: "yellow",
    AppointmentStatus.confirmed: "green",
    AppointmentStatus.cancelled: "red",
    AppointmentStatus.completed: "blue",
}

DATE_LOCALE = "pt_BR"

SERVICE_NOT_FOUND = "Serviço não encontrado"


def _parse_hhmm(value: str) -> time:
    return datetime.strptime(value, "%H:%M").time()


def generate_time_slots() -> List[str]:
    """Fixed half-hour grid from opening to the last start, both inclusive."""
    day = date.min
    current = datetime.combine(day, _parse_hhmm(shop_settings["open_time"]))
    last = datetime.combine(day, _parse_hhmm(shop_settings["close_time"]))
    step = timedelta(minutes=shop_settings["slot_minutes"])

    slots = []
    while current <= last:
        slots.append(current.strftime("%H:%M"))
        current += step
    return slots


def compose_datetime(on_date: date, hhmm: str) -> datetime:
    return datetime.combine(on_date, _parse_hhmm(hhmm))


def is_in_future(when: datetime, now: datetime) -> bool:
    return when > now


def parse_status(value: str) -> Optional[AppointmentStatus]:
    try:
        return AppointmentStatus(value)
    except ValueError:
        return None


def can_cancel(status: str, appointment_date: datetime, now: datetime) -> bool:
    window = timedelta(hours=shop_settings["cancellation_window_hours"])
    return status == AppointmentStatus.pending.value and appointment_date - now > window


def can_reschedule(status: str) -> bool:
    return status == AppointmentStatus.pending.value


def status_label(status: str) -> str:
    parsed = parse_status(status)
    return STATUS_LABELS[parsed] if parsed is not None else status


def status_color(status: str) -> str:
    parsed = parse_status(status)
    return STATUS_COLORS[parsed] if parsed is not None else "gray"


def format_price(price) -> str:
    """
    Format a price as Brazilian currency text, e.g. 1234.5 -> "1.234,50 R$".
    """
    amount = Decimal(str(price)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    whole, cents = f"{abs(amount):.2f}".split(".")

    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)

    return f"{sign}{'.'.join(groups)},{cents} {shop_settings['currency_symbol']}"


def format_duration(duration: int) -> str:
    hours, minutes = divmod(duration, 60)
    if hours > 0:
        return f"{hours}h {minutes}min" if minutes > 0 else f"{hours}h"
    return f"{minutes}min"


def format_long_date(when: datetime) -> str:
    return format_date(when, "dd 'de' MMMM 'de' yyyy", locale=DATE_LOCALE)


def format_long_datetime(when: datetime) -> str:
    return format_datetime(when, "dd 'de' MMMM 'de' yyyy 'às' HH:mm", locale=DATE_LOCALE)


def next_appointment(appointments: List[dict], now: datetime) -> Optional[dict]:
    # expects the list already ordered by appointment_date ascending
    for a in appointments:
        if a["appointment_date"] > now and a["status"] != AppointmentStatus.cancelled.value:
            return a
    return None


def count_pending(appointments: List[dict]) -> int:
    return sum(1 for a in appointments if a["status"] == AppointmentStatus.pending.value)


def greeting_name(email: str) -> str:
    return email.split("@")[0]
