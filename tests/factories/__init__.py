"""Factory Boy factories for test data."""

from __future__ import annotations

from .user import UserFactory

__all__ = ["UserFactory"]
