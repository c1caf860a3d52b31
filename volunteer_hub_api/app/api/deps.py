"""
FastAPI dependencies shared by the endpoint modules.

The ``RecordStore`` lives on ``app.state.store``; each request gets
services bound to it.
"""

from fastapi import Depends, Request

from volunteer_hub_api.app.services.event_service import EventService
from volunteer_hub_api.app.services.feedback_service import FeedbackService
from volunteer_hub_api.app.services.registration_service import RegistrationService
from volunteer_hub_api.app.services.volunteer_service import VolunteerService
from volunteer_hub_api.app.stores.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_volunteer_service(store: RecordStore = Depends(get_store)) -> VolunteerService:
    return VolunteerService(store)


def get_event_service(store: RecordStore = Depends(get_store)) -> EventService:
    return EventService(store)


def get_registration_service(store: RecordStore = Depends(get_store)) -> RegistrationService:
    return RegistrationService(store)


def get_feedback_service(store: RecordStore = Depends(get_store)) -> FeedbackService:
    return FeedbackService(store)
