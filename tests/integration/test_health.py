"""Health endpoint tests."""

from __future__ import annotations


def test_health_reports_user_count(client) -> None:
    client.post("/users?name=Alice")

    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "users": 1, "version": "dev"}


def test_unknown_route_is_problem(client) -> None:
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.mimetype == "application/problem+json"
    assert response.get_json()["detail"] == "Route '/nope' not found"
