"""Statistics schemas."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from booking.schemas.appointments import AppointmentResponse, Pagination


class StatisticsMode(str, Enum):
    """Statistics response mode."""

    SUMMARY = "summary"
    DETAIL = "detail"


class DateCount(BaseModel):
    """Appointments on one day."""

    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(..., alias="date")
    count: int


class TimeSlotCount(BaseModel):
    """Appointments in one time slot."""

    model_config = ConfigDict(populate_by_name=True)

    time_slot: str = Field(..., alias="timeSlot")
    count: int


class UserCount(BaseModel):
    """Appointments made by one user name."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName")
    count: int


class StatisticsSummary(BaseModel):
    """Aggregate statistics for a date range."""

    model_config = ConfigDict(populate_by_name=True)

    total_appointments: int = Field(..., alias="totalAppointments")
    total_users: int = Field(..., alias="totalUsers")
    by_date: list[DateCount] = Field(..., alias="byDate")
    by_time_slot: list[TimeSlotCount] = Field(..., alias="byTimeSlot")
    by_user: list[UserCount] = Field(..., alias="byUser")


class StatisticsDetail(BaseModel):
    """Paginated appointment records for a date range."""

    records: list[AppointmentResponse]
    pagination: Pagination
