"""
Registration endpoints for API v1.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from volunteer_hub_api.app.api.deps import get_registration_service
from volunteer_hub_api.app.schemas.registration import (
    RegistrationListResponse,
    RegistrationResponse,
)
from volunteer_hub_api.app.services.registration_service import RegistrationService


router = APIRouter()


@router.post("", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def create_registration(
    payload: Any = Body(None),
    service: RegistrationService = Depends(get_registration_service),
) -> dict:
    """Register a volunteer for an event.

    The response always has ``attendedAt`` set to ``null``.
    """
    registration = service.create_registration(payload)
    return {"message": "Registration created successfully", "registration": registration}


@router.get("", response_model=RegistrationListResponse)
async def list_registrations(
    service: RegistrationService = Depends(get_registration_service),
) -> dict:
    return {
        "message": "Registrations retrieved successfully",
        "registrations": service.list_registrations(),
    }
