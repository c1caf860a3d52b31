"""
Business logic for events.

Events carry no uniqueness rules.  ``organizerId`` is stored as given
without checking that such a volunteer exists.
"""

import logging
from typing import Any, List

from ..core.errors import InternalError
from ..schemas.event import Event, EventCreate
from .base import RecordService


logger = logging.getLogger(__name__)

INVALID_INPUT = (
    "Invalid input: Ensure 'title', 'description', 'dateTime', 'location', and "
    "'organizerId' are provided and are of the correct types."
)


class EventService(RecordService):
    """Service for creating and listing events."""

    def create_event(self, payload: Any) -> Event:
        """Validate ``payload`` and store a new event.

        An unparseable ``dateTime`` is rejected like any other
        wrong-typed field.
        """
        data = self.parse(EventCreate, payload, INVALID_INPUT)
        try:
            event = Event(
                id=self._new_id(),
                title=data.title,
                description=data.description,
                date_time=data.date_time,
                location=data.location,
                organizer_id=data.organizer_id,
                created_at=self._now(),
            )
            self._store.events.insert(event.id, event)
        except Exception as exc:
            logger.exception("Failed to create event")
            raise InternalError("Server error occurred while creating the event.") from exc
        logger.info("Created event %s '%s'", event.id, event.title)
        return event

    def list_events(self) -> List[Event]:
        return self._store.events.values()
