"""
Top‑level router for version 1 of the API.

This router aggregates the per-collection routers.  The application
mounts it at the root, so paths are ``/volunteers``, ``/events``,
``/registrations`` and ``/feedbacks``.
"""

from fastapi import APIRouter

from .endpoints import events, feedbacks, health, registrations, volunteers

router = APIRouter()

router.include_router(volunteers.router, prefix="/volunteers", tags=["volunteers"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(registrations.router, prefix="/registrations", tags=["registrations"])
router.include_router(feedbacks.router, prefix="/feedbacks", tags=["feedbacks"])
router.include_router(health.router, prefix="/health", tags=["health"])
