"""End-to-end tests for the user CRUD endpoints."""

from __future__ import annotations

import pytest

from tests.helpers.assertions import assert_json_keys, assert_problem
from tests.helpers.http import build_url


def test_walkthrough(client) -> None:
    """Register, rename and delete users through the HTTP surface."""

    alice = client.post(build_url("/users", name="Alice"))
    assert alice.status_code == 200
    assert alice.get_json() == {"id": 1, "greeting": "Hello, Alice!"}

    stranger = client.post("/users")
    assert stranger.get_json() == {"id": 2, "greeting": "Hello, Stranger!"}

    renamed = client.put(build_url("/users/1", newName="Bob"))
    assert renamed.status_code == 200
    assert renamed.get_json() == {"id": 1, "greeting": "Bob"}

    first_delete = client.delete("/users/2")
    assert first_delete.status_code == 200
    assert first_delete.get_json() is True

    second_delete = client.delete("/users/2")
    assert second_delete.status_code == 200
    assert second_delete.get_json() is False

    listing = client.get("/users")
    assert listing.get_json() == [{"id": 1, "greeting": "Bob"}]


def test_list_users_empty(client) -> None:
    response = client.get("/users")
    assert response.status_code == 200
    assert response.get_json() == []


def test_list_users_returns_all(client) -> None:
    for name in ["Ann", "Ben", "Cy"]:
        client.post(build_url("/users", name=name))

    body = client.get("/users").get_json()

    assert [u["greeting"] for u in body] == ["Hello, Ann!", "Hello, Ben!", "Hello, Cy!"]
    for item in body:
        assert_json_keys(item, {"id", "greeting"})


def test_register_empty_name_greets_stranger(client) -> None:
    response = client.post("/users?name=")
    assert response.get_json()["greeting"] == "Hello, Stranger!"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"data": {"name": "Alice"}},
        {"json": {"name": "Alice"}},
    ],
    ids=["form", "json"],
)
def test_register_accepts_body(client, kwargs) -> None:
    response = client.post("/users", **kwargs)

    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "greeting": "Hello, Alice!"}


def test_ids_not_reused_after_delete(client) -> None:
    first = client.post("/users").get_json()
    client.delete(f"/users/{first['id']}")

    second = client.post("/users").get_json()

    assert second["id"] == first["id"] + 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"data": {"newName": "Bob"}},
        {"json": {"newName": "Bob"}},
    ],
    ids=["form", "json"],
)
def test_update_accepts_body(client, kwargs) -> None:
    client.post("/users?name=Alice")

    response = client.put("/users/1", **kwargs)

    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "greeting": "Bob"}


def test_update_missing_user_returns_problem(client) -> None:
    response = client.put("/users/99?newName=Bob")

    body = assert_problem(response, 404, "not_found")
    assert body["detail"] == "User not found: 99"
    assert body["instance"] == "/users/99"


def test_update_without_new_name_is_rejected(client) -> None:
    client.post("/users?name=Alice")

    response = client.put("/users/1")

    body = assert_problem(response, 422, "validation_error")
    assert "newName" in body["details"]["errors"]
    assert client.get("/users").get_json()[0]["greeting"] == "Hello, Alice!"


def test_non_integer_id_is_not_routed(client) -> None:
    assert_problem(client.delete("/users/abc"), 404, "not_found")


def test_method_not_allowed(client) -> None:
    response = client.patch("/users")

    assert_problem(response, 405, "method_not_allowed")
    assert "GET" in response.headers["Allow"]


def test_request_id_echoed(client) -> None:
    response = client.get("/users", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_request_id_generated_per_request(client) -> None:
    first = client.get("/users").headers["X-Request-ID"]
    second = client.get("/users").headers["X-Request-ID"]
    assert first and second and first != second


def test_problem_carries_request_id(client) -> None:
    response = client.put("/users/5?newName=x", headers={"X-Correlation-ID": "corr-9"})
    body = assert_problem(response, 404, "not_found")
    assert body["request_id"] == "corr-9"


def test_stores_are_isolated_per_app(app, client) -> None:
    from greeter import create_app
    from greeter.core.config import TestingConfig

    client.post("/users?name=Alice")
    other = create_app(TestingConfig, instance_relative_config=False).test_client()

    assert other.get("/users").get_json() == []
    assert other.post("/users").get_json()["id"] == 1
