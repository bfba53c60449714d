"""In-memory user store.

Design decisions
----------------
* One :class:`threading.Lock` guards both the collection and the id
  allocator, so every public method is atomic with respect to the others.
* The allocator belongs to the store: there is no module-level counter and
  ids are never reused, even after deletion.
* Stored records never leave the lock. Callers receive copies.
* No use cases here; greetings and Not-Found translation live in services.
"""

from __future__ import annotations

import threading
from dataclasses import replace

from greeter.models.user import User
from greeter.services.errors import ConflictError


class IdAllocator:
    """Monotonic integer id source.

    Not thread-safe on its own; :class:`UserStore` calls it under its lock.

    :param start: First id handed out.
    :type start: int
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def allocate(self) -> int:
        value = self._next
        self._next += 1
        return value


class UserStore:
    """Thread-safe in-memory collection of :class:`User` keyed by id."""

    def __init__(self, allocator: IdAllocator | None = None) -> None:
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._ids = allocator or IdAllocator()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def next_id(self) -> int:
        """Allocate a fresh id.

        :returns: An id greater than every id issued before.
        :rtype: int
        """
        with self._lock:
            return self._ids.allocate()

    def find_all(self) -> list[User]:
        """Return a snapshot of all users in insertion order."""
        with self._lock:
            return [replace(user) for user in self._users.values()]

    def add_user(self, user: User) -> User:
        """Insert ``user`` and return the stored copy.

        :param user: User carrying an id obtained from :meth:`next_id`.
        :type user: User
        :returns: The stored user.
        :rtype: User
        :raises ConflictError: If the id is already present.
        """
        with self._lock:
            if user.id in self._users:
                raise ConflictError("User", f"id {user.id} already exists")
            stored = replace(user)
            self._users[stored.id] = stored
            return replace(stored)

    def update_user(self, user_id: int, new_greeting: str) -> User | None:
        """Replace the greeting of an existing user.

        :param user_id: Target user id.
        :type user_id: int
        :param new_greeting: Replacement greeting text.
        :type new_greeting: str
        :returns: Updated user, or ``None`` when ``user_id`` is unknown.
        :rtype: User | None
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.greeting = new_greeting
            return replace(user)

    def delete_user(self, user_id: int) -> bool:
        """Remove a user, returning whether a record was removed."""
        with self._lock:
            return self._users.pop(user_id, None) is not None
