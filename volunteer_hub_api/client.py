"""Volunteer Hub API client.

A thin wrapper around the HTTP API built on ``requests``.  Every
method returns a tuple ``(data, error)``:

* on success ``data`` holds the record (or list of records) from the
  response envelope and ``error`` is ``None``;
* on failure ``data`` is ``None`` (or an empty list for listings) and
  ``error`` is a dict with ``status_code`` and ``message``.

Any object with a ``requests.Session``-compatible ``request`` method
may be passed as ``session``, which is how the tests drive the client
against an in-process application.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class VolunteerHubAPI:
    """Client for a running Volunteer Hub API instance."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Perform an HTTP request and decode the JSON body.

        Returns:
            ``(body, None)`` for 2xx responses, ``(None, error)`` otherwise.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("error") or err_json.get("message") or str(err_json)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if not response.content:
            return {}, None
        return response.json(), None

    def _create(self, path: str, key: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("POST", path, json_body=payload)
        if error:
            return None, error
        return data.get(key), None

    def _list(self, path: str, key: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data.get(key) or [], None

    # ------------------------------------------------------------------
    # Volunteers
    # ------------------------------------------------------------------
    def create_volunteer(
        self, name: str, email: str, contact: str, skills: List[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"name": name, "email": email, "contact": contact, "skills": skills}
        return self._create("/volunteers", "volunteer", payload)

    def get_volunteer(self, volunteer_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/volunteers/{volunteer_id}")
        if error:
            return None, error
        return data.get("volunteer"), None

    def list_volunteers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/volunteers", "volunteers")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def create_event(
        self,
        title: str,
        description: str,
        date_time: str,
        location: str,
        organizer_id: str,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an event.

        Args:
            date_time: ISO-8601 date/time of the event.
        """
        payload = {
            "title": title,
            "description": description,
            "dateTime": date_time,
            "location": location,
            "organizerId": organizer_id,
        }
        return self._create("/events", "event", payload)

    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/events", "events")

    # ------------------------------------------------------------------
    # Registrations
    # ------------------------------------------------------------------
    def create_registration(
        self, event_id: str, volunteer_id: str, status: str = "Registered"
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"eventId": event_id, "volunteerId": volunteer_id, "status": status}
        return self._create("/registrations", "registration", payload)

    def list_registrations(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/registrations", "registrations")

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------
    def create_feedback(
        self, volunteer_id: str, event_id: str, feedback: str, rating: float
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {
            "volunteerId": volunteer_id,
            "eventId": event_id,
            "feedback": feedback,
            "rating": rating,
        }
        return self._create("/feedbacks", "feedback", payload)

    def list_feedbacks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/feedbacks", "feedbacks")
