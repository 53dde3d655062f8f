import pytest


@pytest.fixture
def create_event(client):
    def _create_event(name="Test Wedding", owner_email="owner@example.com", **extra):
        response = client.post("/api/events", json={"name": name, "owner_email": owner_email, **extra})
        assert response.status_code == 201, response.text
        return response.json()

    return _create_event


@pytest.fixture
def join_event(client):
    def _join_event(code, guest_name="Alice"):
        response = client.post("/api/sessions", json={"event_code": code, "guest_name": guest_name})
        assert response.status_code == 201, response.text
        return response.json()

    return _join_event
