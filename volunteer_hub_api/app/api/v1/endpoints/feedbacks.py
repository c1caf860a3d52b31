"""
Feedback endpoints for API v1.

Volunteers leave a comment and a numeric rating for an event.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from volunteer_hub_api.app.api.deps import get_feedback_service
from volunteer_hub_api.app.schemas.feedback import FeedbackListResponse, FeedbackResponse
from volunteer_hub_api.app.services.feedback_service import FeedbackService


router = APIRouter()


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
async def create_feedback(
    payload: Any = Body(None),
    service: FeedbackService = Depends(get_feedback_service),
) -> dict:
    """Submit feedback for an event.

    ``rating`` must be a number; ``0`` is accepted.
    """
    feedback = service.create_feedback(payload)
    return {"message": "Feedback created successfully", "feedback": feedback}


@router.get("", response_model=FeedbackListResponse)
async def list_feedbacks(service: FeedbackService = Depends(get_feedback_service)) -> dict:
    return {"message": "Feedback retrieved successfully", "feedbacks": service.list_feedbacks()}
