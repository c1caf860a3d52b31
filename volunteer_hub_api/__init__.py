"""
Top‑level package for the Volunteer Hub API.

The service lives in ``app``; ``client`` holds a small HTTP client for
talking to a running instance.
"""

__all__ = []
