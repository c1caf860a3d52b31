"""
Business logic for volunteers.

Creation checks run in a fixed order and stop at the first failure:
request shape, email format, then email uniqueness.  The uniqueness
scan and the insert happen under the volunteers collection lock so two
concurrent requests cannot both claim the same address.
"""

import logging
import re
from typing import Any, List

from ..core.errors import ConflictError, InternalError, NotFoundError, ValidationError
from ..schemas.volunteer import Volunteer, VolunteerCreate
from .base import RecordService


logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

INVALID_INPUT = (
    "Invalid input: Ensure 'name', 'contact', 'email', and 'skills' are provided "
    "and are of the correct types."
)
INVALID_EMAIL = "Invalid input: Ensure 'email' is a valid email address."
DUPLICATE_EMAIL = "Invalid input: Volunteer with the same email already exists."


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


class VolunteerService(RecordService):
    """Service for registering and looking up volunteers."""

    def create_volunteer(self, payload: Any) -> Volunteer:
        """Validate ``payload`` and store a new volunteer.

        Raises:
            ValidationError: Missing or wrong-typed field, or bad email.
            ConflictError: Another volunteer already uses the email.
            InternalError: Building or storing the record failed.
        """
        data = self.parse(VolunteerCreate, payload, INVALID_INPUT)
        if not is_valid_email(data.email):
            raise ValidationError(INVALID_EMAIL)

        volunteers = self._store.volunteers
        with volunteers.lock:
            if any(existing.email == data.email for existing in volunteers.values()):
                logger.info("Rejected volunteer with duplicate email %s", data.email)
                raise ConflictError(DUPLICATE_EMAIL)
            try:
                volunteer = Volunteer(
                    id=self._new_id(),
                    name=data.name,
                    email=data.email,
                    contact=data.contact,
                    skills=list(data.skills),
                    created_at=self._now(),
                )
                volunteers.insert(volunteer.id, volunteer)
            except Exception as exc:
                logger.exception("Failed to create volunteer")
                raise InternalError("Server error occurred while creating the volunteer.") from exc

        logger.info("Created volunteer %s", volunteer.id)
        return volunteer

    def get_volunteer(self, volunteer_id: str) -> Volunteer:
        """Return a volunteer by ID.

        Raises:
            NotFoundError: If no volunteer has this ID.
        """
        volunteer = self._store.volunteers.get(volunteer_id)
        if volunteer is None:
            raise NotFoundError("Volunteer with the provided ID does not exist.")
        return volunteer

    def list_volunteers(self) -> List[Volunteer]:
        return self._store.volunteers.values()
