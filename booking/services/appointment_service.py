"""Appointment service for business logic."""

from datetime import date
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from booking.core.exceptions import NotFoundException, ValidationException
from booking.core.validators import validate_date, validate_phone
from booking.database import store_errors
from booking.models.appointments import appointments
from booking.schemas.appointments import (
    AppointmentFilters,
    AppointmentListResponse,
    AppointmentResponse,
    AppointmentWrite,
    DeleteResponse,
    Pagination,
)

logger = structlog.get_logger()

REQUIRED_FIELDS = ("user_name", "phone", "appointment_date", "appointment_time")


def prepare_appointment_values(data: AppointmentWrite) -> dict[str, Any]:
    """
    Validate a submitted appointment and build column values.

    Args:
        data: Submitted appointment fields

    Returns:
        Values for every mutable column

    Raises:
        ValidationException: If a required field is missing or malformed
    """
    if not all(getattr(data, field) for field in REQUIRED_FIELDS):
        raise ValidationException(
            "user_name, phone, appointment_date and appointment_time are required"
        )

    if not validate_phone(data.phone):
        raise ValidationException("Invalid phone number format")

    if not validate_date(data.appointment_date):
        raise ValidationException("Invalid date format")

    return {
        "user_name": data.user_name,
        "phone": data.phone,
        "appointment_date": date.fromisoformat(data.appointment_date),
        "appointment_time": data.appointment_time,
        "contact_info": data.contact_info or None,
        "notes": data.notes or None,
    }


class AppointmentService:
    """Service for managing appointments."""

    def __init__(self, db: AsyncSession):
        """Initialize service with database session."""
        self.db = db

    async def create_appointment(self, data: AppointmentWrite) -> AppointmentResponse:
        """
        Create a new appointment.

        The slot is not checked for an existing booking, so the same
        date and time can be booked more than once.

        Args:
            data: Appointment fields

        Returns:
            Created appointment
        """
        values = prepare_appointment_values(data)

        with store_errors("Failed to create appointment", "appointment_store_error"):
            stmt = insert(appointments).values(**values).returning(appointments)
            result = await self.db.execute(stmt)
            row = result.fetchone()
            await self.db.commit()

        logger.info(
            "appointment_created",
            appointment_id=str(row.id),
            appointment_date=str(row.appointment_date),
            appointment_time=row.appointment_time,
        )
        return AppointmentResponse.model_validate(dict(row._mapping))

    async def get_appointment(self, appointment_id: UUID) -> AppointmentResponse:
        """
        Get appointment by ID.

        Raises:
            NotFoundException: If appointment not found
        """
        with store_errors("Failed to fetch appointment", "appointment_store_error"):
            stmt = select(appointments).where(appointments.c.id == appointment_id)
            result = await self.db.execute(stmt)
            row = result.fetchone()

        if not row:
            raise NotFoundException("Appointment not found")

        return AppointmentResponse.model_validate(dict(row._mapping))

    async def list_appointments(self, filters: AppointmentFilters) -> AppointmentListResponse:
        """
        List appointments, newest first, with optional date filter.

        Args:
            filters: Filter and pagination parameters

        Returns:
            Paginated list of appointments
        """
        conditions = []
        if filters.appointment_date:
            conditions.append(appointments.c.appointment_date == filters.appointment_date)

        with store_errors("Failed to list appointments", "appointment_store_error"):
            count_stmt = select(func.count()).select_from(appointments).where(*conditions)
            total_result = await self.db.execute(count_stmt)
            total = total_result.scalar() or 0

            offset = (filters.page - 1) * filters.page_size
            stmt = (
                select(appointments)
                .where(*conditions)
                .order_by(appointments.c.created_at.desc(), appointments.c.id)
                .limit(filters.page_size)
                .offset(offset)
            )
            result = await self.db.execute(stmt)
            rows = result.fetchall()

        return AppointmentListResponse(
            appointments=[AppointmentResponse.model_validate(dict(row._mapping)) for row in rows],
            pagination=Pagination.build(total, filters.page, filters.page_size),
        )

    async def update_appointment(
        self,
        appointment_id: UUID,
        data: AppointmentWrite,
    ) -> AppointmentResponse:
        """
        Replace every mutable field of an appointment.

        Args:
            appointment_id: Appointment ID
            data: Full set of appointment fields

        Returns:
            Updated appointment

        Raises:
            ValidationException: If the submitted fields are invalid
            NotFoundException: If appointment not found
        """
        values = prepare_appointment_values(data)

        # Check existence
        await self.get_appointment(appointment_id)

        values["updated_at"] = func.now()

        with store_errors("Failed to update appointment", "appointment_store_error"):
            stmt = (
                update(appointments)
                .where(appointments.c.id == appointment_id)
                .values(**values)
                .returning(appointments)
            )
            result = await self.db.execute(stmt)
            row = result.fetchone()
            await self.db.commit()

        if not row:
            raise NotFoundException("Appointment not found")

        logger.info("appointment_updated", appointment_id=str(appointment_id))
        return AppointmentResponse.model_validate(dict(row._mapping))

    async def delete_appointment(self, appointment_id: UUID) -> DeleteResponse:
        """
        Permanently delete an appointment.

        Raises:
            NotFoundException: If appointment not found
        """
        # Check existence
        await self.get_appointment(appointment_id)

        with store_errors("Failed to delete appointment", "appointment_store_error"):
            stmt = delete(appointments).where(appointments.c.id == appointment_id)
            await self.db.execute(stmt)
            await self.db.commit()

        logger.info("appointment_deleted", appointment_id=str(appointment_id))
        return DeleteResponse(success=True, message="Appointment deleted")
