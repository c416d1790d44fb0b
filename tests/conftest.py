"""Pytest fixtures — isolated in-memory stores for fast, independent tests."""
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from planner.main import app
from planner.store import RecordStore, get_store

SEED_DATA = {
    "users": [
        {"id": 1, "username": "ana", "email": "ana@example.com"},
        {"id": 2, "username": "bruno", "email": "bruno@example.com"},
    ],
    "events": [
        {"id": 1, "title": "Picnic", "location_id": 1, "user_id": 1, "from": "12:00", "to": "15:00"},
        {"id": 2, "title": "Run", "location_id": 2, "user_id": 2},
        {"id": 3, "title": "Dinner", "location_id": 1, "user_id": 1},
    ],
    "locations": [
        {"id": 1, "name": "Park", "lat": 41.39, "lng": 2.17},
        {"id": 2, "name": "Riverside"},
    ],
    "participants": [
        {"id": 1, "user_id": 2, "event_id": 1},
        {"id": 2, "user_id": 1, "event_id": 2},
        {"id": 3, "user_id": 2, "event_id": 3},
    ],
}


@pytest.fixture(scope="function")
def store():
    """A fresh, empty store for each test."""
    return RecordStore()


@pytest.fixture(scope="function")
def seeded_store():
    """A fresh store holding SEED_DATA."""
    return RecordStore.from_dataset(SEED_DATA)


def _client_for(store: RecordStore):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(store):
    """TestClient whose GraphQL context uses the empty ``store`` fixture."""
    yield from _client_for(store)


@pytest.fixture(scope="function")
def seeded_client(seeded_store):
    """TestClient whose GraphQL context uses ``seeded_store``."""
    yield from _client_for(seeded_store)


# ---------------------------------------------------------------------------
# Helpers: post GraphQL documents, return the JSON body
# ---------------------------------------------------------------------------
def gql(client: TestClient, query: str, variables: Optional[dict[str, Any]] = None) -> dict:
    """Helper — POST /graphql and return the response JSON."""
    resp = client.post("/graphql", json={"query": query, "variables": variables or {}})
    assert resp.status_code == 200, resp.text
    return resp.json()


def create_test_user(client: TestClient, username: str = "ana", email: str = "a@x.com") -> dict:
    """Helper — createUser mutation, returns the created user."""
    body = gql(client, """
        mutation ($data: CreateUserInput!) {
            createUser(data: $data) { id username email }
        }
    """, {"data": {"username": username, "email": email}})
    assert "errors" not in body, body
    return body["data"]["createUser"]


def create_test_location(client: TestClient, name: str = "Park", **fields) -> dict:
    """Helper — createLocation mutation, returns the created location."""
    body = gql(client, """
        mutation ($data: CreateLocationInput!) {
            createLocation(data: $data) { id name desc lat lng }
        }
    """, {"data": {"name": name, **fields}})
    assert "errors" not in body, body
    return body["data"]["createLocation"]


def create_test_event(client: TestClient, user_id: str, location_id: str, title: str = "Picnic", **fields) -> dict:
    """Helper — createEvent mutation, returns the created event."""
    body = gql(client, """
        mutation ($data: CreateEventInput!) {
            createEvent(data: $data) { id title desc date from to location_id user_id }
        }
    """, {"data": {"title": title, "user_id": user_id, "location_id": location_id, **fields}})
    assert "errors" not in body, body
    return body["data"]["createEvent"]


def create_test_participant(client: TestClient, user_id: str, event_id: str) -> dict:
    """Helper — createParticipant mutation, returns the created participant."""
    body = gql(client, """
        mutation ($data: CreateParticipantInput!) {
            createParticipant(data: $data) { id user_id event_id }
        }
    """, {"data": {"user_id": user_id, "event_id": event_id}})
    assert "errors" not in body, body
    return body["data"]["createParticipant"]
