"""OpenAPI document and Swagger UI tests."""

from __future__ import annotations

from greeter import create_app
from greeter.core.config import TestingConfig


def test_document_lists_user_operations(client) -> None:
    response = client.get("/openapi.json")

    assert response.status_code == 200
    doc = response.get_json()
    assert doc["openapi"].startswith("3.")
    paths = doc["paths"]
    assert {method: op["summary"] for method, op in paths["/users"].items()} == {
        "get": "Get list of all users",
        "post": "Register a user",
    }
    assert {method: op["summary"] for method, op in paths["/users/{user_id}"].items()} == {
        "put": "Change name of a user",
        "delete": "Delete a user",
    }


def test_document_describes_parameters_and_schemas(client) -> None:
    doc = client.get("/openapi.json").get_json()

    assert set(doc["components"]["schemas"]["User"]["properties"]) == {"id", "greeting"}
    post_params = {p["name"]: p for p in doc["paths"]["/users"]["post"]["parameters"]}
    assert post_params["name"]["in"] == "query"
    assert post_params["name"].get("required", False) is False
    put = doc["paths"]["/users/{user_id}"]["put"]
    put_params = {p["name"]: p for p in put["parameters"]}
    assert put_params["newName"]["required"] is True
    assert put_params["user_id"]["in"] == "path"
    assert "404" in put["responses"]


def test_document_follows_base_prefix() -> None:
    class PrefixedConfig(TestingConfig):
        API_BASE_PREFIX = "/api"

    client = create_app(PrefixedConfig, instance_relative_config=False).test_client()

    paths = client.get("/api/openapi.json").get_json()["paths"]
    assert set(paths) == {"/api/users", "/api/users/{user_id}"}


def test_swagger_ui_points_at_document(client) -> None:
    response = client.get("/docs")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert b"/openapi.json" in response.data
    assert b"swagger-ui" in response.data
