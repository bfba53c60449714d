"""Repository package exposing storage access for domain models."""

from __future__ import annotations

from greeter.repositories.user import IdAllocator, UserStore

__all__ = ["IdAllocator", "UserStore"]
