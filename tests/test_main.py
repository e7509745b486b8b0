"""
Tests for the main application endpoints.
"""
from fastapi import FastAPI
from fastapi.testclient import TestClient

from health_diary.core.middleware import setup_middlewares
from health_diary.exceptions import register_exception_handlers


def test_root_endpoint(client):
    """
    Test the root endpoint returns a welcome message.
    """
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data
    assert data["docs"] == "/docs"


def test_health_check(client):
    """
    Test the health check endpoint returns a healthy status.
    """
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "database" in data


def test_unknown_route_uses_message_body(client):
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert "message" in response.json()


def test_request_id_headers(client):
    response = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
    assert "X-Process-Time" in response.headers

    generated = client.get("/")
    assert generated.headers["X-Request-ID"]


def test_unhandled_error_keeps_request_headers():
    app = FastAPI()
    register_exception_handlers(app)
    setup_middlewares(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom", headers={"X-Request-ID": "req-500"})

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert response.headers["X-Request-ID"] == "req-500"
    assert "X-Process-Time" in response.headers
