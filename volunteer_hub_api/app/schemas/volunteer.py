"""
Pydantic models for volunteer data.

``VolunteerCreate`` describes the request body; it only checks shape
(presence, types, non-empty text).  Email format and uniqueness are
enforced by ``VolunteerService`` so each rule reports its own error.
``Volunteer`` is the stored record.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, StrictStr

from .base import CamelModel, RecordModel


class VolunteerCreate(CamelModel):
    """Schema for registering a volunteer."""

    name: StrictStr = Field(..., min_length=1, examples=["Ann"])
    email: StrictStr = Field(..., min_length=1, examples=["ann@example.com"])
    contact: StrictStr = Field(..., min_length=1, examples=["555-0100"])
    # Order is preserved; an empty list is allowed.
    skills: List[StrictStr] = Field(..., examples=[["first-aid"]])


class Volunteer(RecordModel):
    """Stored volunteer record."""

    name: str
    email: str
    contact: str
    skills: List[str]
    created_at: datetime


class VolunteerResponse(BaseModel):
    message: str
    volunteer: Volunteer


class VolunteerListResponse(BaseModel):
    message: str
    volunteers: List[Volunteer]
