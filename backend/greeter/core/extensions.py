"""Application-scoped extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask, current_app

from greeter.repositories.user import UserStore

STORE_KEY = "user_store"


def init_app(app: Flask) -> None:
    """Attach a fresh :class:`UserStore` to ``app.extensions``.

    Parameters
    ----------
    app: flask.Flask
        Application owning the store. Each application instance gets its own
        store and id sequence; existing stores are kept on re-initialization.
    """
    app.extensions.setdefault(STORE_KEY, UserStore())


def get_user_store() -> UserStore:
    """Return the store bound to the current application."""
    store = current_app.extensions.get(STORE_KEY)
    if store is None:
        raise RuntimeError("User store is not initialized. Call init_app() first.")
    return store
