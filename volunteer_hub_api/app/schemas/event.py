"""
Pydantic models for event data.

``EventCreate`` validates the request body and parses ``dateTime``;
``Event`` is the stored record.  ``organizerId`` is expected to be a
volunteer ID but is stored as given.
"""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, StrictStr, field_validator

from .base import CamelModel, RecordModel


class EventCreate(CamelModel):
    """Schema for creating an event."""

    title: StrictStr = Field(..., min_length=1, examples=["Beach clean-up"])
    description: StrictStr = Field(..., min_length=1, examples=["Bring gloves"])
    # ISO-8601 strings or unix timestamps are accepted.
    date_time: datetime = Field(..., examples=["2026-11-01T09:00:00Z"])
    location: StrictStr = Field(..., min_length=1, examples=["North pier"])
    organizer_id: StrictStr = Field(..., min_length=1)

    @field_validator("date_time")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Read naive date/times as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Event(RecordModel):
    """Stored event record."""

    title: str
    description: str
    date_time: datetime
    location: str
    organizer_id: str
    created_at: datetime


class EventResponse(BaseModel):
    message: str
    event: Event


class EventListResponse(BaseModel):
    message: str
    events: List[Event]
