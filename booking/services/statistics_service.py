"""Statistics service for appointment analytics."""

from datetime import date

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from booking.core.exceptions import ValidationException
from booking.core.validators import parse_iso_date
from booking.database import store_errors
from booking.models.appointments import appointments
from booking.schemas.appointments import AppointmentResponse, Pagination
from booking.schemas.statistics import (
    DateCount,
    StatisticsDetail,
    StatisticsSummary,
    TimeSlotCount,
    UserCount,
)

TOP_USERS_LIMIT = 10

STORE_ERROR_MESSAGE = "Failed to load statistics"


def resolve_date_range(start: str | None, end: str | None) -> tuple[date, date]:
    """
    Parse the statistics date range.

    Raises:
        ValidationException: If either bound is missing or not ISO-8601
    """
    if not start or not end:
        raise ValidationException("Missing date parameters")

    try:
        return parse_iso_date(start), parse_iso_date(end)
    except ValueError:
        raise ValidationException("Invalid date format")


class StatisticsService:
    """Aggregate and paginated views over appointments in a date range."""

    def __init__(self, db: AsyncSession):
        """Initialize service with database session."""
        self.db = db

    @staticmethod
    def _in_range(start: date, end: date):
        return appointments.c.appointment_date.between(start, end)

    async def get_summary(self, start: date, end: date) -> StatisticsSummary:
        """
        Count appointments in ``[start, end]``.

        Args:
            start: First day, inclusive
            end: Last day, inclusive

        Returns:
            Totals plus per-day, per-slot and top per-user counts
        """
        in_range = self._in_range(start, end)
        appointment_count = func.count().label("appointment_count")

        with store_errors(STORE_ERROR_MESSAGE, "statistics_store_error"):
            totals_stmt = (
                select(func.count(), func.count(distinct(appointments.c.user_name)))
                .select_from(appointments)
                .where(in_range)
            )
            totals = (await self.db.execute(totals_stmt)).one()

            by_date_stmt = (
                select(appointments.c.appointment_date, func.count())
                .where(in_range)
                .group_by(appointments.c.appointment_date)
                .order_by(appointments.c.appointment_date)
            )
            by_date = (await self.db.execute(by_date_stmt)).all()

            by_slot_stmt = (
                select(appointments.c.appointment_time, appointment_count)
                .where(in_range)
                .group_by(appointments.c.appointment_time)
                .order_by(appointment_count.desc(), appointments.c.appointment_time)
            )
            by_slot = (await self.db.execute(by_slot_stmt)).all()

            by_user_stmt = (
                select(appointments.c.user_name, appointment_count)
                .where(in_range)
                .group_by(appointments.c.user_name)
                .order_by(appointment_count.desc(), appointments.c.user_name)
                .limit(TOP_USERS_LIMIT)
            )
            by_user = (await self.db.execute(by_user_stmt)).all()

        total_appointments, total_users = totals
        return StatisticsSummary(
            total_appointments=total_appointments,
            total_users=total_users,
            by_date=[DateCount(day=day, count=count) for day, count in by_date],
            by_time_slot=[TimeSlotCount(time_slot=slot, count=count) for slot, count in by_slot],
            by_user=[UserCount(user_name=name, count=count) for name, count in by_user],
        )

    async def get_detail(
        self,
        start: date,
        end: date,
        page: int,
        page_size: int,
    ) -> StatisticsDetail:
        """
        Page through appointments in ``[start, end]``.

        Records are ordered by date descending, then time ascending. A page
        past the end yields no records but keeps the pagination totals.
        """
        in_range = self._in_range(start, end)

        with store_errors(STORE_ERROR_MESSAGE, "statistics_store_error"):
            count_stmt = select(func.count()).select_from(appointments).where(in_range)
            total = (await self.db.execute(count_stmt)).scalar() or 0

            stmt = (
                select(appointments)
                .where(in_range)
                .order_by(
                    appointments.c.appointment_date.desc(),
                    appointments.c.appointment_time.asc(),
                    appointments.c.id,
                )
                .limit(page_size)
                .offset((page - 1) * page_size)
            )
            rows = (await self.db.execute(stmt)).fetchall()

        return StatisticsDetail(
            records=[AppointmentResponse.model_validate(dict(row._mapping)) for row in rows],
            pagination=Pagination.build(total, page, page_size),
        )
