"""User endpoints."""

from __future__ import annotations

from flask import Blueprint

from greeter.api.deps import get_user_service, json_response, request_params, timing
from greeter.schemas import UserRegisterSchema, UserSchema, UserUpdateSchema
from greeter.services.errors import ServiceError

bp = Blueprint("users", __name__)

user_schema = UserSchema()
user_list_schema = UserSchema(many=True)
user_register_schema = UserRegisterSchema()
user_update_schema = UserUpdateSchema()


@bp.get("")
@timing
def list_users():
    """Return all users as a JSON array."""

    service = get_user_service()
    return json_response(user_list_schema.dump(service.list_users()))


@bp.post("")
@timing
def register_user():
    """Register a user greeted by ``name`` (query, form or JSON body)."""

    params = user_register_schema.load(request_params())
    service = get_user_service()
    try:
        user = service.register_user(params["name"])
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response(user_schema.dump(user))


@bp.put("/<int:user_id>")
@timing
def update_user(user_id: int):
    """Replace the greeting of a user with ``newName``."""

    params = user_update_schema.load(request_params())
    service = get_user_service()
    try:
        user = service.update_user(user_id, params["new_name"])
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response(user_schema.dump(user))


@bp.delete("/<int:user_id>")
@timing
def delete_user(user_id: int):
    """Delete a user; the body is ``true`` when a record was removed."""

    service = get_user_service()
    return json_response(service.delete_user(user_id))
