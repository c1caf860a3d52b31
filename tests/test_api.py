"""Integration tests for the HTTP API.

These validate status codes, response envelopes and error bodies.
Run with: pytest tests/test_api.py -v
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from volunteer_hub_api.app.api.deps import get_volunteer_service
from volunteer_hub_api.app.schemas.registration import Registration
from volunteer_hub_api.app.services import volunteer_service
from volunteer_hub_api.app.services.volunteer_service import VolunteerService

from .conftest import ANN


EVENT = {
    "title": "Food drive",
    "description": "Sort donations",
    "dateTime": "2026-12-05T14:30:00Z",
    "location": "Community hall",
    "organizerId": "org-1",
}


class TestVolunteers:
    """Tests for /volunteers."""

    def test_ann_scenario(self, api_client: TestClient):
        """Create, conflict on repeat, fetch by id, list one."""
        created = api_client.post("/volunteers", json=ANN)
        assert created.status_code == 201
        body = created.json()
        assert body["message"] == "Volunteer created successfully"
        volunteer = body["volunteer"]
        assert volunteer["id"]
        assert volunteer["skills"] == ["first-aid"]

        repeat = api_client.post("/volunteers", json=ANN)
        assert repeat.status_code == 400
        assert repeat.json() == {
            "status": 400,
            "code": "CONFLICT",
            "error": volunteer_service.DUPLICATE_EMAIL,
        }

        fetched = api_client.get(f"/volunteers/{volunteer['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["volunteer"] == volunteer

        listed = api_client.get("/volunteers")
        assert listed.status_code == 200
        assert listed.json()["volunteers"] == [volunteer]

    def test_fields_round_trip(self, api_client: TestClient):
        """Supplied fields come back unchanged, in camelCase, alongside id and createdAt."""
        volunteer = api_client.post("/volunteers", json=ANN).json()["volunteer"]
        assert set(volunteer) == {"id", "name", "email", "contact", "skills", "createdAt"}
        for key, value in ANN.items():
            assert volunteer[key] == value

    def test_invalid_email(self, api_client: TestClient, store):
        """A malformed email is a 400 validation error."""
        response = api_client.post("/volunteers", json={**ANN, "email": "not-an-email"})
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert response.json()["error"] == volunteer_service.INVALID_EMAIL
        assert len(store.volunteers) == 0

    def test_short_valid_email(self, api_client: TestClient):
        """a@b.co is a valid address."""
        assert api_client.post("/volunteers", json={**ANN, "email": "a@b.co"}).status_code == 201

    def test_trailing_newline_email(self, api_client: TestClient, store):
        """An email ending in a newline is rejected and does not shadow the real one."""
        response = api_client.post("/volunteers", json={**ANN, "email": "ann@x.com\n"})
        assert response.status_code == 400
        assert response.json()["error"] == volunteer_service.INVALID_EMAIL
        assert api_client.post("/volunteers", json=ANN).status_code == 201
        assert len(store.volunteers) == 1

    def test_missing_field(self, api_client: TestClient):
        """Missing skills is a 400 with the field message."""
        payload = {k: v for k, v in ANN.items() if k != "skills"}
        response = api_client.post("/volunteers", json=payload)
        assert response.status_code == 400
        assert response.json()["error"] == volunteer_service.INVALID_INPUT

    def test_get_unknown(self, api_client: TestClient):
        """An unknown id is a 404."""
        response = api_client.get("/volunteers/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {
            "status": 404,
            "code": "NOT_FOUND",
            "error": "Volunteer with the provided ID does not exist.",
        }

    def test_list_empty(self, api_client: TestClient):
        """Listing an empty collection returns an empty sequence."""
        response = api_client.get("/volunteers")
        assert response.status_code == 200
        assert response.json() == {"message": "Volunteers retrieved successfully", "volunteers": []}

    def test_malformed_json(self, api_client: TestClient):
        """A body that is not valid JSON is a 400, not a 422."""
        response = api_client.post(
            "/volunteers",
            content="{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_array_body(self, api_client: TestClient):
        """A JSON array is rejected as invalid input."""
        response = api_client.post("/volunteers", json=[ANN])
        assert response.status_code == 400

    def test_empty_body(self, api_client: TestClient):
        """A request without a body is rejected as invalid input."""
        assert api_client.post("/volunteers").status_code == 400

    def test_internal_error(self, app, store):
        """Unexpected failures become a generic 500."""

        def broken_ids() -> str:
            raise RuntimeError("boom")

        app.dependency_overrides[get_volunteer_service] = lambda: VolunteerService(
            store, id_factory=broken_ids
        )
        response = TestClient(app).post("/volunteers", json=ANN)
        assert response.status_code == 500
        assert response.json() == {
            "status": 500,
            "code": "INTERNAL_ERROR",
            "error": "Server error occurred while creating the volunteer.",
        }
        assert len(store.volunteers) == 0


class TestEvents:
    """Tests for /events."""

    def test_create_and_list(self, api_client: TestClient):
        created = api_client.post("/events", json=EVENT)
        assert created.status_code == 201
        event = created.json()["event"]
        assert event["title"] == "Food drive"
        assert event["organizerId"] == "org-1"
        assert "dateTime" in event and "createdAt" in event

        listed = api_client.get("/events")
        assert listed.status_code == 200
        assert listed.json() == {"message": "Events retrieved successfully", "events": [event]}

    def test_bad_date_time(self, api_client: TestClient):
        """An unparseable dateTime is a 400."""
        response = api_client.post("/events", json={**EVENT, "dateTime": "someday"})
        assert response.status_code == 400
        assert "dateTime" in response.json()["error"]

    def test_missing_title(self, api_client: TestClient):
        payload = {k: v for k, v in EVENT.items() if k != "title"}
        assert api_client.post("/events", json=payload).status_code == 400


class TestRegistrations:
    """Tests for /registrations."""

    def test_create_registration(self, api_client: TestClient):
        """attendedAt is null and registeredAt is not before the request."""
        started = datetime.now(timezone.utc)
        response = api_client.post(
            "/registrations",
            json={"eventId": "e1", "volunteerId": "v1", "status": "Registered"},
        )
        assert response.status_code == 201
        body = response.json()["registration"]
        assert body["attendedAt"] is None
        registration = Registration.model_validate(body)
        assert registration.registered_at >= started

    def test_list_registrations(self, api_client: TestClient):
        api_client.post(
            "/registrations",
            json={"eventId": "e1", "volunteerId": "v1", "status": "Registered"},
        )
        response = api_client.get("/registrations")
        assert response.status_code == 200
        assert response.json()["message"] == "Registrations retrieved successfully"
        assert len(response.json()["registrations"]) == 1

    def test_missing_status(self, api_client: TestClient):
        response = api_client.post("/registrations", json={"eventId": "e1", "volunteerId": "v1"})
        assert response.status_code == 400


class TestFeedbacks:
    """Tests for /feedbacks."""

    def test_missing_rating(self, api_client: TestClient):
        """Feedback without a rating is a 400 and nothing is stored."""
        response = api_client.post(
            "/feedbacks", json={"volunteerId": "v1", "eventId": "e1", "feedback": "Nice"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert api_client.get("/feedbacks").json()["feedbacks"] == []

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_rating(self, api_client: TestClient, token):
        """Non-standard JSON number tokens are a 400 and nothing is stored."""
        body = '{"volunteerId": "v1", "eventId": "e1", "feedback": "Nice", "rating": %s}' % token
        response = api_client.post(
            "/feedbacks", content=body, headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert api_client.get("/feedbacks").json()["feedbacks"] == []

    def test_create_and_list(self, api_client: TestClient):
        created = api_client.post(
            "/feedbacks",
            json={"volunteerId": "v1", "eventId": "e1", "feedback": "Nice", "rating": 0},
        )
        assert created.status_code == 201
        feedback = created.json()["feedback"]
        assert feedback["rating"] == 0
        listed = api_client.get("/feedbacks").json()
        assert listed["message"] == "Feedback retrieved successfully"
        assert listed["feedbacks"] == [feedback]


class TestHealth:
    """Tests for /health."""

    def test_reports_counts(self, api_client: TestClient):
        api_client.post("/volunteers", json=ANN)
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "collections": {"volunteers": 1, "events": 0, "registrations": 0, "feedbacks": 0},
        }
