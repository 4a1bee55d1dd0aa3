"""
Tests for root and health check endpoints
"""


def test_root_endpoint(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "API is running!"
    assert response.headers["content-type"].startswith("text/plain")


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["service"] == "directory-gateway"
    assert data["status"] == "healthy"
    assert data["supabase"] == "configured"
    assert "timestamp" in data
    assert "version" in data


def test_unknown_route(client):
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_docs_accessible(client):
    response = client.get("/docs")
    assert response.status_code == 200
