"""Global pytest fixtures for the greeter service."""

from __future__ import annotations

from typing import Any

import pytest
from flask import Flask

from greeter import create_app
from greeter.core.config import TestingConfig
from greeter.repositories.user import UserStore
from greeter.services.user_service import UserService


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application with a fresh in-memory store.

    Function-scoped: every test starts with an empty store whose ids begin
    at ``1``. No app context is pushed so each request gets its own ``g``.
    """

    return create_app(TestingConfig, instance_relative_config=False)


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def store() -> UserStore:
    """Return an empty store detached from any application."""

    return UserStore()


@pytest.fixture()
def service(store: UserStore) -> UserService:
    """Return a service bound to :func:`store`."""

    return UserService(store)
