"""Appointment endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Query, status

from booking.core.exceptions import ValidationException
from booking.core.validators import validate_date
from booking.dependencies import DatabaseSession, Paging
from booking.schemas.appointments import (
    AppointmentFilters,
    AppointmentListResponse,
    AppointmentResponse,
    AppointmentWrite,
    DeleteResponse,
)
from booking.services.appointment_service import AppointmentService

router = APIRouter()


@router.post(
    "/",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Appointments"],
    summary="Book an appointment",
)
async def create_appointment(
    data: AppointmentWrite,
    db: DatabaseSession,
) -> AppointmentResponse:
    """
    Book a date and time slot.

    Args:
        data: Appointment fields
        db: Database session

    Returns:
        Created appointment
    """
    service = AppointmentService(db)
    return await service.create_appointment(data)


@router.get(
    "/",
    response_model=AppointmentListResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="List appointments",
)
async def list_appointments(
    db: DatabaseSession,
    paging: Paging,
    date_filter: str | None = Query(None, alias="date"),
) -> AppointmentListResponse:
    """
    List appointments, newest first.

    Args:
        db: Database session
        paging: Page number and page size
        date_filter: Only appointments on this ``yyyy-MM-dd`` date

    Returns:
        Paginated list of appointments
    """
    if date_filter and not validate_date(date_filter):
        raise ValidationException("Invalid date format")

    filters = AppointmentFilters(
        appointment_date=date.fromisoformat(date_filter) if date_filter else None,
        page=paging.page,
        page_size=paging.page_size,
    )

    service = AppointmentService(db)
    return await service.list_appointments(filters)


@router.get(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Get appointment by ID",
)
async def get_appointment(
    appointment_id: UUID,
    db: DatabaseSession,
) -> AppointmentResponse:
    """
    Get a specific appointment by ID.

    Raises:
        NotFoundException: If appointment not found
    """
    service = AppointmentService(db)
    return await service.get_appointment(appointment_id)


@router.put(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Replace appointment",
)
async def update_appointment(
    appointment_id: UUID,
    data: AppointmentWrite,
    db: DatabaseSession,
) -> AppointmentResponse:
    """
    Replace all fields of an existing appointment.

    Args:
        appointment_id: Appointment ID
        data: Full set of appointment fields
        db: Database session

    Returns:
        Updated appointment

    Raises:
        ValidationException: If fields are missing or malformed
        NotFoundException: If appointment not found
    """
    service = AppointmentService(db)
    return await service.update_appointment(appointment_id, data)


@router.delete(
    "/{appointment_id}",
    response_model=DeleteResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Delete appointment",
)
async def delete_appointment(
    appointment_id: UUID,
    db: DatabaseSession,
) -> DeleteResponse:
    """
    Permanently delete an appointment.

    Raises:
        NotFoundException: If appointment not found
    """
    service = AppointmentService(db)
    return await service.delete_appointment(appointment_id)
