"""User domain model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class User:
    """A registered user and the greeting attached to it.

    :param id: Store-assigned identifier, unique for the store lifetime.
    :type id: int
    :param greeting: Greeting text shown for the user.
    :type greeting: str
    """

    id: int
    greeting: str
