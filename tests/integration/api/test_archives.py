import uuid

import pytest

from src.models import Archive, ArchiveStatus


def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def delay(mocker):
    return mocker.patch("src.tasks.workers.archive_worker.build_event_archive.delay")


@pytest.mark.integration
def test_bulk_download_flow(client, create_event, join_event, delay, db_session):
    event = create_event()
    token = join_event(event["code"])["session_token"]
    upload = client.post("/api/photos/upload-url", json={"content_type": "image/jpeg"}, headers=auth(token)).json()
    client.post(f"/api/photos/confirm/{upload['photo_id']}", json={"file_size": 500}, headers=auth(token))

    queued = client.post(f"/api/events/{event['id']}/archives")
    assert queued.status_code == 202
    archive = queued.json()
    assert archive["status"] == "pending"
    assert archive["photo_count"] == 1
    assert archive["skipped_count"] == 0
    delay.assert_called_once_with(archive["id"])

    pending = client.get(f"/api/archives/{archive['id']}")
    assert pending.status_code == 200
    assert pending.json()["download_url"] is None

    row = db_session.get(Archive, uuid.UUID(archive["id"]))
    row.status = ArchiveStatus.ready
    row.size = 1234
    db_session.commit()

    ready = client.get(f"/api/archives/{archive['id']}").json()
    assert ready["status"] == "ready"
    assert f"events/{event['id']}/archives/{archive['id']}.zip" in ready["download_url"]
    assert ready["expires_at"] is not None


@pytest.mark.integration
def test_bulk_download_without_photos(client, create_event, delay):
    event = create_event()

    response = client.post(f"/api/events/{event['id']}/archives")

    assert response.status_code == 404
    assert response.json()["detail"] == "no photos found for event"
    delay.assert_not_called()


@pytest.mark.integration
def test_unknown_archive(client):
    assert client.get(f"/api/archives/{uuid.uuid4()}").status_code == 404


@pytest.mark.integration
def test_bulk_download_with_queue_down(client, create_event, join_event, delay, db_session):
    event = create_event()
    token = join_event(event["code"])["session_token"]
    client.post("/api/photos/upload-url", json={"content_type": "image/jpeg"}, headers=auth(token))
    delay.side_effect = ConnectionError("broker unreachable")

    response = client.post(f"/api/events/{event['id']}/archives")

    assert response.status_code == 500
    archive = db_session.query(Archive).filter(Archive.event_id == uuid.UUID(event["id"])).one()
    assert archive.status == ArchiveStatus.failed
