"""Time slot schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class TimeSlotStatus(BaseModel):
    """One slot and whether it is taken."""

    model_config = ConfigDict(populate_by_name=True)

    time: str
    is_booked: bool = Field(..., alias="isBooked")


class TimeSlotsResponse(BaseModel):
    """Slot board for a single date."""

    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(..., alias="date")
    time_slots: list[TimeSlotStatus] = Field(..., alias="timeSlots")
