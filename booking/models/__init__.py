"""Database models."""

from booking.models.appointments import appointments, metadata

__all__ = [
    "appointments",
    "metadata",
]
