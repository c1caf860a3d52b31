"""
Event endpoints for API v1.

Events can be created and listed.  There is no lookup by ID.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from volunteer_hub_api.app.api.deps import get_event_service
from volunteer_hub_api.app.schemas.event import EventListResponse, EventResponse
from volunteer_hub_api.app.services.event_service import EventService


router = APIRouter()


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: Any = Body(None),
    service: EventService = Depends(get_event_service),
) -> dict:
    """Create a new event.

    ``dateTime`` must parse as a date/time; the organizer is not
    checked against the volunteers.
    """
    event = service.create_event(payload)
    return {"message": "Event created successfully", "event": event}


@router.get("", response_model=EventListResponse)
async def list_events(service: EventService = Depends(get_event_service)) -> dict:
    return {"message": "Events retrieved successfully", "events": service.list_events()}
