import pytest


@pytest.mark.integration
def test_health_endpoint(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "environment": "test"}


@pytest.mark.integration
def test_unknown_route(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
