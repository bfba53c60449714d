"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from greeter.core.extensions import get_user_store
from greeter.services.user_service import UserService

F = TypeVar("F", bound=Callable[..., Any])


def get_user_service() -> UserService:
    """Return a :class:`UserService` bound to the current application's store."""

    return UserService(
        get_user_store(),
        default_name=current_app.config.get("DEFAULT_USER_NAME", "Stranger"),
    )


def request_params() -> dict[str, Any]:
    """Merge query string, form fields and a JSON object body.

    Later sources win: a JSON body overrides form fields, which override the
    query string. Non-object JSON bodies are ignored.
    """

    params: dict[str, Any] = request.args.to_dict()
    params.update(request.form.to_dict())
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        params.update(body)
    return params


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
