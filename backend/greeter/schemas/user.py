"""User resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class BaseSchema(Schema):
    """Base schema enabling ordered output for consistent API responses."""

    class Meta:
        ordered = True


class UserSchema(BaseSchema):
    """Public representation of a user entity."""

    id = fields.Integer(required=True)
    greeting = fields.String(required=True)


class UserRegisterSchema(Schema):
    """Query parameters accepted when registering a user.

    A missing ``name`` loads as ``None``; the service substitutes the
    configured default name.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.String(load_default=None)


class UserUpdateSchema(Schema):
    """Parameters for replacing a user's greeting."""

    class Meta:
        unknown = EXCLUDE

    new_name = fields.String(required=True, data_key="newName")
