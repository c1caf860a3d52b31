"""
Business logic for registrations.

The event and volunteer IDs are loose references: they are not looked
up in their collections.  ``status`` is stored verbatim and
``attendedAt`` always starts out empty.
"""

import logging
from typing import Any, List

from ..core.errors import InternalError
from ..schemas.registration import Registration, RegistrationCreate
from .base import RecordService


logger = logging.getLogger(__name__)

INVALID_INPUT = (
    "Invalid input: Ensure 'eventId', 'volunteerId', and 'status' are provided "
    "and are of the correct types."
)


class RegistrationService(RecordService):
    """Service for registering volunteers for events."""

    def create_registration(self, payload: Any) -> Registration:
        data = self.parse(RegistrationCreate, payload, INVALID_INPUT)
        try:
            registration = Registration(
                id=self._new_id(),
                event_id=data.event_id,
                volunteer_id=data.volunteer_id,
                status=data.status,
                registered_at=self._now(),
                attended_at=None,
            )
            self._store.registrations.insert(registration.id, registration)
        except Exception as exc:
            logger.exception("Failed to create registration")
            raise InternalError("Server error occurred while creating the registration.") from exc
        logger.info(
            "Registered volunteer %s for event %s (%s)",
            registration.volunteer_id,
            registration.event_id,
            registration.id,
        )
        return registration

    def list_registrations(self) -> List[Registration]:
        return self._store.registrations.values()
