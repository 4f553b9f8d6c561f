# barbershop/data.py

from decimal import Decimal

from sqlmodel import Session, select

from barbershop.models import Service

DEFAULT_SERVICES = [
    {"name": "Corte de Cabelo", "description": "Corte masculino tradicional ou moderno", "price": Decimal("50.00"), "duration": 30},
    {"name": "Barba", "description": "Aparar e modelar a barba com toalha quente", "price": Decimal("35.00"), "duration": 30},
    {"name": "Corte + Barba", "description": "Combo completo de cabelo e barba", "price": Decimal("75.00"), "duration": 60},
    {"name": "Pigmentação", "description": "Pigmentação de barba ou cabelo", "price": Decimal("40.00"), "duration": 45},
    {"name": "Sobrancelha", "description": "Design de sobrancelha na navalha", "price": Decimal("15.00"), "duration": 15},
]

shop_settings = {
    "open_time": "08:00",
    "close_time": "18:00",  # last bookable start, inclusive
    "slot_minutes": 30,
    "cancellation_window_hours": 2,
    "currency_symbol": "R$",
}


def seed_services(session: Session) -> int:
    if session.exec(select(Service)).first() is not None:
        return 0
    for s in DEFAULT_SERVICES:
        session.add(Service(**s))
    session.commit()
    return len(DEFAULT_SERVICES)
