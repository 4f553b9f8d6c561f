# barbershop/models.py

from typing import Optional
from datetime import datetime
from decimal import Decimal

from sqlmodel import SQLModel, Field


class Service(SQLModel, table=True):
    __tablename__ = "services"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: str = ""
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    duration: int  # minutes
    is_active: bool = True


class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(index=True, foreign_key="users.id")
    # No FK constraint: a dangling reference is shown with a placeholder
    service_id: int = Field(index=True)
    appointment_date: datetime = Field(index=True)
    notes: Optional[str] = None
    status: str = "pending"


class Profile(SQLModel, table=True):
    __tablename__ = "profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True, unique=True, foreign_key="users.id")
    full_name: str = ""
    phone: Optional[str] = None
    avatar_url: Optional[str] = None


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    password_hash: str
