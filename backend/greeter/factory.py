"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from greeter.api import init_app as init_api
from greeter.core import errors, extensions, middleware
from greeter.core import logger as app_logging
from greeter.core.config import BaseConfig, get_config

# Order matters: the store must exist before blueprints use it, and error
# handlers go last so they cover every registered route.
INITIALIZERS = (
    middleware.init_app,
    extensions.init_app,
    app_logging.init_app,
    init_api,
    errors.init_app,
)


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :param config: Config object or import path; ``APP_ENV`` decides when
        omitted.
    :param instance_relative_config: Overlay ``instance/<filename>`` if present.
    :param instance_config_filename: Instance config file name.
    :returns: Configured application with its own empty user store.
    :rtype: flask.Flask
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)
    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)  # type: ignore[attr-defined]

    app_logging.configure_logging(
        app.config.get("LOG_LEVEL", "INFO"),
        fmt=app.config.get("LOG_FORMAT", "json"),
    )
    for init in INITIALIZERS:
        init(app)
    return app
