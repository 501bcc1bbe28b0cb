"""Appointments table model using SQLAlchemy Core."""

from uuid import uuid4

from sqlalchemy import (
    TIMESTAMP,
    VARCHAR,
    Column,
    Date,
    Index,
    MetaData,
    Table,
    Text,
    Uuid,
    func,
)

# Metadata for all tables
metadata = MetaData()

# Appointments table
appointments = Table(
    "appointments",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid4),
    # Booker
    Column("user_name", Text, nullable=False),
    Column("phone", VARCHAR(11), nullable=False),
    # Slot
    Column("appointment_date", Date, nullable=False),
    Column("appointment_time", Text, nullable=False),
    # Optional details
    Column("contact_info", Text, nullable=True),
    Column("notes", Text, nullable=True),
    # Audit fields
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()),
    # Not unique: a slot can be booked twice
    Index("ix_appointments_date_time", "appointment_date", "appointment_time"),
    Index("ix_appointments_appointment_date", "appointment_date"),
)
