# barbershop/schemas.py

from pydantic import BaseModel, Field
from enum import Enum
from datetime import datetime, date
from decimal import Decimal
from typing import List, Optional


class AppointmentStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserPublic(BaseModel):
    id: int
    email: str


class UserCreate(BaseModel):
    email: str
    password: str = Field(min_length=8, max_length=72)


class ServicePublic(BaseModel):
    id: int
    name: str
    description: str
    price: Decimal
    duration: int
    price_display: str
    duration_display: str


class ServiceSummary(BaseModel):
    name: str
    description: str = ""
    price: Decimal
    duration: int


class AppointmentCreate(BaseModel):
    service_id: int
    appointment_date: date
    appointment_time: str = Field(pattern=r"^\d{2}:\d{2}$")  # HH:MM, one of the time slots
    notes: Optional[str] = None


class AppointmentPublic(BaseModel):
    id: int
    service_id: int
    appointment_date: datetime
    notes: Optional[str]
    status: str
    status_label: str
    status_color: str
    service: ServiceSummary
    date_display: str
    time_display: str
    price_display: str
    duration_display: str
    can_cancel: bool
    can_reschedule: bool


class TimeSlotsResponse(BaseModel):
    slots: List[str]


class NextAppointment(BaseModel):
    id: int
    appointment_date: datetime
    status: str
    service_name: str
    price_display: str
    date_display: str


class DashboardStats(BaseModel):
    greeting_name: str
    total_appointments: int
    pending_appointments: int
    next_appointment: Optional[NextAppointment]


class ProfilePublic(BaseModel):
    id: int
    user_id: int
    email: str  # display only
    full_name: str
    phone: Optional[str]
    avatar_url: Optional[str]


class ProfileUpdate(BaseModel):
    full_name: str
    phone: Optional[str] = None
