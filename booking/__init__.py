"""Appointment booking API."""
