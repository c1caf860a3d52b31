"""Pytest configuration and shared fixtures."""

import itertools
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from volunteer_hub_api.app.main import create_app
from volunteer_hub_api.app.stores.record_store import RecordStore


FIXED_NOW = datetime(2026, 1, 15, 12, 30, tzinfo=timezone.utc)

ANN = {"name": "Ann", "email": "ann@x.com", "contact": "555", "skills": ["first-aid"]}


@pytest.fixture
def store() -> RecordStore:
    return RecordStore.in_memory()


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter):04d}"


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def api_client(app) -> TestClient:
    return TestClient(app)
