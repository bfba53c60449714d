"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from greeter.api.deps import json_response, timing
from greeter.core.extensions import get_user_store

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application health and the current user count."""

    payload = {
        "status": "ok",
        "users": len(get_user_store()),
        "version": current_app.config.get("APP_VERSION", "dev"),
    }
    return json_response(payload)
