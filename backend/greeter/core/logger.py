"""Logging setup: JSON or text lines on stdout, tagged with a request id."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")
EXTRA_KEYS = ("endpoint", "elapsed_ms", "user_id")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including known ``extra`` keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        payload.update({key: getattr(record, key) for key in EXTRA_KEYS if hasattr(record, key)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


FORMATTERS: dict[str, logging.Formatter] = {
    "json": JSONFormatter(),
    "text": logging.Formatter(TEXT_FORMAT),
}


class RequestIdFilter(logging.Filter):
    """Stamp ``request_id`` on every record (``None`` outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def _incoming_request_id() -> str | None:
    return next((request.headers[h] for h in CORRELATION_HEADERS if request.headers.get(h)), None)


def ensure_request_id() -> str:
    """Return the id of the current request, assigning one on first use.

    Outside a request a throwaway UUID4 is returned.
    """

    if not has_request_context():
        return str(uuid4())
    if "request_id" not in g:
        g.request_id = _incoming_request_id() or str(uuid4())
    return g.request_id


def configure_logging(level: str | int = "INFO", *, fmt: str = "json") -> None:
    """Route the root logger to stdout with the ``fmt`` formatter.

    :param level: Level name or number.
    :param fmt: ``"json"`` or ``"text"``; unknown values fall back to JSON.
    """

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(FORMATTERS.get(fmt.lower(), FORMATTERS["json"]))
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else level.upper()
    root.setLevel(level)


def init_app(app: Flask) -> None:
    """Seed request ids before each request and echo them on responses."""

    app.logger.addFilter(RequestIdFilter())
    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = ["configure_logging", "init_app", "ensure_request_id", "JSONFormatter"]
