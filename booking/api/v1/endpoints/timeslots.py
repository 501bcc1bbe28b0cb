"""Time slot availability endpoints."""

from fastapi import APIRouter, Query, status

from booking.dependencies import DatabaseSession
from booking.schemas.timeslots import TimeSlotsResponse
from booking.services.timeslot_service import TimeSlotService

router = APIRouter()


@router.get(
    "/timeslots",
    response_model=TimeSlotsResponse,
    status_code=status.HTTP_200_OK,
    tags=["Time Slots"],
    summary="Slot availability for a date",
)
async def get_time_slots(
    db: DatabaseSession,
    date_str: str | None = Query(None, alias="date"),
) -> TimeSlotsResponse:
    """Every bookable slot on ``date`` with its booked flag."""
    service = TimeSlotService(db)
    return await service.get_time_slots(date_str)
