"""OpenAPI document and Swagger UI page for the user resource."""

from __future__ import annotations

from typing import Any

from apispec import APISpec
from apispec.ext.marshmallow import MarshmallowPlugin
from flask import Blueprint, Flask, current_app, render_template_string, url_for

from greeter.api.deps import json_response
from greeter.schemas import ProblemSchema, UserRegisterSchema, UserSchema, UserUpdateSchema

bp = Blueprint("docs", __name__)

SPEC_KEY = "openapi_spec"
OPENAPI_VERSION = "3.0.3"
SWAGGER_UI_VERSION = "5"
PROBLEM_MIMETYPE = "application/problem+json"

SWAGGER_UI_PAGE = """<!doctype html>
<html>
<head>
  <title>{{ title }}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{{ version }}/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{{ version }}/swagger-ui-bundle.js"></script>
  <script>SwaggerUIBundle({url: "{{ spec_url }}", dom_id: "#swagger-ui"});</script>
</body>
</html>
"""

USER_ID_PARAM = {
    "in": "path",
    "name": "user_id",
    "required": True,
    "schema": {"type": "integer"},
}


def _json(schema: Any, description: str) -> dict[str, Any]:
    return {"description": description, "content": {"application/json": {"schema": schema}}}


def _problem(description: str) -> dict[str, Any]:
    return {"description": description, "content": {PROBLEM_MIMETYPE: {"schema": ProblemSchema}}}


def build_openapi_spec(app: Flask) -> APISpec:
    """Describe the user endpoints as an OpenAPI 3 document.

    Paths carry the application's ``API_BASE_PREFIX`` so the document matches
    the mounted routes.
    """

    spec = APISpec(
        title="Greeter",
        version=app.config.get("APP_VERSION", "dev"),
        openapi_version=OPENAPI_VERSION,
        plugins=[MarshmallowPlugin()],
        info={"description": "Simple User Controller"},
    )
    spec.components.schema("User", schema=UserSchema)
    spec.components.schema("Problem", schema=ProblemSchema)
    spec.tag({"name": "users", "description": "Simple User Controller"})

    base = "/" + app.config.get("API_BASE_PREFIX", "").strip("/")
    users_path = base.rstrip("/") + "/users"

    spec.path(
        path=users_path,
        operations={
            "get": {
                "tags": ["users"],
                "summary": "Get list of all users",
                "operationId": "listUsers",
                "responses": {"200": _json({"type": "array", "items": UserSchema}, "All users")},
            },
            "post": {
                "tags": ["users"],
                "summary": "Register a user",
                "operationId": "registerUser",
                "parameters": [{"in": "query", "schema": UserRegisterSchema}],
                "responses": {"200": _json(UserSchema, "The registered user")},
            },
        },
    )
    spec.path(
        path=users_path + "/{user_id}",
        operations={
            "put": {
                "tags": ["users"],
                "summary": "Change name of a user",
                "operationId": "updateUser",
                "description": "``newName`` may also be sent as a form field or JSON body.",
                "parameters": [USER_ID_PARAM, {"in": "query", "schema": UserUpdateSchema}],
                "responses": {
                    "200": _json(UserSchema, "The updated user"),
                    "404": _problem("No user has this id"),
                    "422": _problem("``newName`` is missing"),
                },
            },
            "delete": {
                "tags": ["users"],
                "summary": "Delete a user",
                "operationId": "deleteUser",
                "parameters": [USER_ID_PARAM],
                "responses": {"200": _json({"type": "boolean"}, "Whether a user was removed")},
            },
        },
    )
    return spec


def get_openapi_spec() -> APISpec:
    """Return the current application's document, building it on first use."""

    spec = current_app.extensions.get(SPEC_KEY)
    if spec is None:
        spec = current_app.extensions[SPEC_KEY] = build_openapi_spec(current_app)
    return spec


@bp.get("/openapi.json")
def openapi_json():
    """Serve the OpenAPI document."""

    return json_response(get_openapi_spec().to_dict())


@bp.get("/docs")
def swagger_ui():
    """Serve a Swagger UI page pointed at :func:`openapi_json`."""

    return render_template_string(
        SWAGGER_UI_PAGE,
        title="Greeter API",
        version=SWAGGER_UI_VERSION,
        spec_url=url_for("docs.openapi_json"),
    )
