"""API v1 router configuration."""

from fastapi import APIRouter

from booking.api.v1.endpoints import appointments, health, statistics, timeslots

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"])
api_router.include_router(statistics.router, tags=["Statistics"])
api_router.include_router(timeslots.router, tags=["Time Slots"])
