"""Bookable half-hour slots."""

from collections.abc import Iterable

TIME_SLOTS: tuple[str, ...] = (
    "09:00-09:30",
    "09:30-10:00",
    "10:00-10:30",
    "10:30-11:00",
    "11:00-11:30",
    "11:30-12:00",
    "14:00-14:30",
    "14:30-15:00",
    "15:00-15:30",
    "15:30-16:00",
    "16:00-16:30",
    "16:30-17:00",
    "17:00-17:30",
    "17:30-18:00",
)


def mark_booked(booked_times: Iterable[str]) -> list[dict[str, str | bool]]:
    """Annotate every slot with whether it appears in ``booked_times``."""
    booked = set(booked_times)
    return [{"time": slot, "isBooked": slot in booked} for slot in TIME_SLOTS]
