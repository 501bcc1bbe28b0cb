"""Time slot availability service."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booking.core.exceptions import ValidationException
from booking.core.timeslots import mark_booked
from booking.core.validators import validate_date
from booking.database import store_errors
from booking.models.appointments import appointments
from booking.schemas.timeslots import TimeSlotsResponse


class TimeSlotService:
    """Report which slots of a day already hold an appointment."""

    def __init__(self, db: AsyncSession):
        """Initialize service with database session."""
        self.db = db

    async def get_time_slots(self, date_str: str | None) -> TimeSlotsResponse:
        """
        Get the slot board for one date.

        Nothing is locked: a slot reported free can be booked by someone
        else before the caller submits.

        Args:
            date_str: Date in ``yyyy-MM-dd`` form

        Returns:
            Every slot with its booked flag

        Raises:
            ValidationException: If the date is missing or malformed
        """
        if not date_str:
            raise ValidationException("Missing date parameter")
        if not validate_date(date_str):
            raise ValidationException("Invalid date format")

        day = date.fromisoformat(date_str)

        with store_errors("Failed to load time slots", "timeslot_store_error"):
            stmt = (
                select(appointments.c.appointment_time)
                .where(appointments.c.appointment_date == day)
                .distinct()
            )
            booked = (await self.db.execute(stmt)).scalars().all()

        return TimeSlotsResponse.model_validate({"date": day, "timeSlots": mark_booked(booked)})
