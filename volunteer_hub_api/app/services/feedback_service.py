"""
Business logic for feedback.

``rating`` must be present and numeric.  Its 1 to 5 range is a
convention only and is not enforced.
"""

import logging
from typing import Any, List

from ..core.errors import InternalError
from ..schemas.feedback import Feedback, FeedbackCreate
from .base import RecordService


logger = logging.getLogger(__name__)

INVALID_INPUT = (
    "Invalid input: Ensure 'volunteerId', 'eventId', 'feedback', and 'rating' are "
    "provided and are of the correct types."
)


class FeedbackService(RecordService):
    """Service for collecting volunteer feedback."""

    def create_feedback(self, payload: Any) -> Feedback:
        data = self.parse(FeedbackCreate, payload, INVALID_INPUT)
        try:
            feedback = Feedback(
                id=self._new_id(),
                volunteer_id=data.volunteer_id,
                event_id=data.event_id,
                feedback=data.feedback,
                rating=data.rating,
                created_at=self._now(),
            )
            self._store.feedbacks.insert(feedback.id, feedback)
        except Exception as exc:
            logger.exception("Failed to create feedback")
            raise InternalError("Server error occurred while creating the feedback.") from exc
        logger.info("Recorded feedback %s for event %s", feedback.id, feedback.event_id)
        return feedback

    def list_feedbacks(self) -> List[Feedback]:
        return self._store.feedbacks.values()
