"""
Volunteer endpoints for API v1.

Volunteers can be registered, fetched by ID and listed.  Validation
and uniqueness rules live in ``VolunteerService``; domain errors are
turned into JSON error responses by the handlers in ``main``.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from volunteer_hub_api.app.api.deps import get_volunteer_service
from volunteer_hub_api.app.schemas.volunteer import VolunteerListResponse, VolunteerResponse
from volunteer_hub_api.app.services.volunteer_service import VolunteerService


router = APIRouter()


@router.post("", response_model=VolunteerResponse, status_code=status.HTTP_201_CREATED)
async def create_volunteer(
    payload: Any = Body(None),
    service: VolunteerService = Depends(get_volunteer_service),
) -> dict:
    """Register a new volunteer.

    Returns 400 if a field is missing or mistyped, the email is
    malformed, or the email is already in use.
    """
    volunteer = service.create_volunteer(payload)
    return {"message": "Volunteer created successfully", "volunteer": volunteer}


@router.get("/{volunteer_id}", response_model=VolunteerResponse)
async def get_volunteer(
    volunteer_id: str,
    service: VolunteerService = Depends(get_volunteer_service),
) -> dict:
    """Retrieve a single volunteer by ID, or 404."""
    volunteer = service.get_volunteer(volunteer_id)
    return {"message": "Volunteer retrieved successfully", "volunteer": volunteer}


@router.get("", response_model=VolunteerListResponse)
async def list_volunteers(
    service: VolunteerService = Depends(get_volunteer_service),
) -> dict:
    return {"message": "Volunteers retrieved successfully", "volunteers": service.list_volunteers()}
