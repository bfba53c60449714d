"""Domain models held by the in-memory store."""

from __future__ import annotations

from .user import User

__all__ = ["User"]
