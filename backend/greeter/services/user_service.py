"""User domain services."""

from __future__ import annotations

import logging

from greeter.core.config import DEFAULT_USER_NAME
from greeter.models.user import User
from greeter.repositories.user import UserStore
from greeter.services.base import BaseService
from greeter.services.errors import NotFoundError

log = logging.getLogger(__name__)


def build_greeting(name: str) -> str:
    return f"Hello, {name}!"


class UserService(BaseService):
    """Coordinate user-centric use cases on top of a :class:`UserStore`.

    :param store: Store holding the users.
    :type store: UserStore
    :param default_name: Name greeted when registration omits one.
    :type default_name: str
    """

    def __init__(self, store: UserStore, *, default_name: str = DEFAULT_USER_NAME) -> None:
        self.store = store
        self.default_name = default_name

    def list_users(self) -> list[User]:
        """Return every stored user."""

        return self.store.find_all()

    def register_user(self, name: str | None = None) -> User:
        """Register a user greeted by ``name`` under a freshly allocated id.

        Missing or empty names fall back to :attr:`default_name`.
        """

        user = User(id=self.store.next_id(), greeting=build_greeting(name or self.default_name))
        stored = self.store.add_user(user)
        log.info("user.registered", extra={"user_id": stored.id})
        return stored

    def update_user(self, user_id: int, new_name: str) -> User:
        """Replace the greeting of ``user_id`` with ``new_name``.

        :raises NotFoundError: When no user has ``user_id``.
        """

        user = self.store.update_user(user_id, new_name)
        if user is None:
            raise NotFoundError("User", user_id)
        log.info("user.updated", extra={"user_id": user_id})
        return user

    def delete_user(self, user_id: int) -> bool:
        """Delete ``user_id`` and report whether a record was removed."""

        removed = self.store.delete_user(user_id)
        if removed:
            log.info("user.deleted", extra={"user_id": user_id})
        return removed
