"""Convenience exports for application schemas."""

from __future__ import annotations

from .problem import ProblemSchema
from .user import UserRegisterSchema, UserSchema, UserUpdateSchema

__all__ = [
    "ProblemSchema",
    "UserSchema",
    "UserRegisterSchema",
    "UserUpdateSchema",
]
