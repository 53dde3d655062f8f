import pytest


def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.integration
def test_join_event(client, create_event):
    event = create_event()

    response = client.post("/api/sessions", json={"event_code": event["code"].lower(), "guest_name": "  Alice "})

    assert response.status_code == 201
    body = response.json()
    assert body["guest_name"] == "Alice"
    assert len(body["session_token"]) == 64
    assert body["event"]["id"] == event["id"]
    assert "owner_email" not in body["event"]


@pytest.mark.integration
@pytest.mark.parametrize("payload", [
    {"event_code": "SHORT", "guest_name": "Alice"},
    {"event_code": "ABC-1234", "guest_name": "Alice"},
    {"event_code": "ABCD1234", "guest_name": "   "},
    {"event_code": "ABCD1234", "guest_name": "x" * 101},
])
def test_join_event_validation(client, payload):
    assert client.post("/api/sessions", json=payload).status_code == 400


@pytest.mark.integration
def test_join_unknown_event(client):
    response = client.post("/api/sessions", json={"event_code": "ZZZZ9999", "guest_name": "Alice"})

    assert response.status_code == 404


@pytest.mark.integration
def test_join_inactive_event(client, create_event):
    event = create_event()
    client.patch(f"/api/events/{event['id']}", json={"status": "inactive"}, headers=auth(event["owner_token"]))

    response = client.post("/api/sessions", json={"event_code": event["code"], "guest_name": "Alice"})

    assert response.status_code == 404
    assert response.json()["detail"] == "event not found or inactive"


@pytest.mark.integration
def test_validate_refresh_and_revoke(client, create_event, join_event):
    event = create_event()
    token = join_event(event["code"])["session_token"]

    validated = client.get(f"/api/sessions/{token}")
    assert validated.status_code == 200
    assert validated.json()["event"]["code"] == event["code"]

    refreshed = client.post("/api/sessions/refresh", json={"session_token": token})
    assert refreshed.status_code == 200

    revoked = client.request("DELETE", "/api/sessions", json={"session_token": token})
    assert revoked.status_code == 200

    assert client.get(f"/api/sessions/{token}").status_code == 401
    assert client.request("DELETE", "/api/sessions", json={"session_token": token}).status_code == 404


@pytest.mark.integration
def test_session_unusable_after_event_closes(client, create_event, join_event):
    event = create_event()
    token = join_event(event["code"])["session_token"]

    client.post(f"/api/events/{event['id']}/close", headers=auth(event["owner_token"]))

    response = client.post("/api/photos/upload-url", json={"content_type": "image/jpeg"}, headers=auth(token))
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.integration
def test_cleanup_endpoint(client):
    response = client.post("/api/sessions/cleanup")

    assert response.status_code == 200
    assert response.json()["deleted"] == 0
