"""Appointment schemas for request/response validation."""

import math
from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AppointmentWrite(BaseModel):
    """
    Schema for creating or replacing an appointment.

    The mandatory fields are optional here; the service reports a missing
    field with a readable 400 instead of a schema error.
    """

    user_name: str | None = None
    phone: str | None = None
    appointment_date: str | None = None
    appointment_time: str | None = None
    contact_info: str | None = None
    notes: str | None = None


class AppointmentResponse(BaseModel):
    """Schema for appointment response."""

    id: UUID
    user_name: str
    phone: str
    appointment_date: date
    appointment_time: str
    contact_info: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class Pagination(BaseModel):
    """Pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    page_size: int = Field(..., alias="pageSize")
    total_pages: int = Field(..., alias="totalPages")

    @classmethod
    def build(cls, total: int, page: int, page_size: int) -> "Pagination":
        """Build pagination metadata for a result set."""
        return cls(
            total=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size),
        )


class AppointmentListResponse(BaseModel):
    """Schema for paginated appointment list response."""

    appointments: list[AppointmentResponse]
    pagination: Pagination


class AppointmentFilters(BaseModel):
    """Schema for appointment list filtering."""

    appointment_date: date | None = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)


class DeleteResponse(BaseModel):
    """Acknowledgement returned after a delete."""

    success: bool
    message: str
