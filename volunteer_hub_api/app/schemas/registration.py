"""
Pydantic models for event registrations.

A registration links a volunteer to an event.  Neither ID is checked
against the other collections, and ``status`` is free text: the values
``Registered``, ``Attended`` and ``Missed`` are conventional, not
enforced.  ``attendedAt`` is always ``null`` because no operation marks
attendance.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, StrictStr

from .base import CamelModel, RecordModel


class RegistrationStatus(str, Enum):
    REGISTERED = "Registered"
    ATTENDED = "Attended"
    MISSED = "Missed"


class RegistrationCreate(CamelModel):
    """Schema for creating a registration."""

    event_id: StrictStr = Field(..., min_length=1)
    volunteer_id: StrictStr = Field(..., min_length=1)
    status: StrictStr = Field(..., min_length=1, examples=[RegistrationStatus.REGISTERED.value])


class Registration(RecordModel):
    """Stored registration record."""

    event_id: str
    volunteer_id: str
    status: str
    registered_at: datetime
    attended_at: Optional[datetime] = None


class RegistrationResponse(BaseModel):
    message: str
    registration: Registration


class RegistrationListResponse(BaseModel):
    message: str
    registrations: List[Registration]
