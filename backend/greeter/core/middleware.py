"""HTTP middleware: upstream proxy headers and CORS for the user resource."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix


def _parse_origins(raw: str) -> list[str] | str:
    """Split ``CORS_ORIGINS``; blank or ``"*"`` means any origin."""

    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return "*" if not origins or origins == ["*"] else origins


def init_app(app: Flask) -> None:
    """Wrap the WSGI app in ``ProxyFix`` and enable CORS.

    ``ProxyFix`` trusts one hop of ``X-Forwarded-*`` headers and is skipped
    when ``USE_PROXYFIX`` is false. Credentials are only allowed for an
    explicit origin list.
    """

    if app.config.get("USE_PROXYFIX", True):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    origins = _parse_origins(app.config.get("CORS_ORIGINS", ""))
    prefix = app.config.get("API_BASE_PREFIX", "").rstrip("/")
    CORS(
        app,
        resources={rf"{prefix}/users*": {"origins": origins}},
        supports_credentials=origins != "*",
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
