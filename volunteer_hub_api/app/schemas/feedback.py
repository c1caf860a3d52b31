"""
Pydantic schemas for volunteer feedback.

Feedback is left by a volunteer about an event.  ``rating`` must be a
number (booleans are refused) and is conventionally 1 to 5, but the
range is not checked.  Presence is checked explicitly, so a rating of
``0`` is accepted.  NaN and infinities are refused since they have no
JSON representation.
"""

from datetime import datetime
from typing import Annotated, List, Union

from pydantic import AllowInfNan, BaseModel, Field, StrictFloat, StrictInt, StrictStr

from .base import CamelModel, RecordModel


Rating = Union[StrictInt, Annotated[StrictFloat, AllowInfNan(False)]]


class FeedbackCreate(CamelModel):
    """Schema for creating feedback."""

    volunteer_id: StrictStr = Field(..., min_length=1)
    event_id: StrictStr = Field(..., min_length=1)
    feedback: StrictStr = Field(..., min_length=1, examples=["Well organised"])
    rating: Rating = Field(..., examples=[5])


class Feedback(RecordModel):
    """Stored feedback record."""

    volunteer_id: str
    event_id: str
    feedback: str
    rating: Rating
    created_at: datetime


class FeedbackResponse(BaseModel):
    message: str
    feedback: Feedback


class FeedbackListResponse(BaseModel):
    message: str
    feedbacks: List[Feedback]
