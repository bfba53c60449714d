"""RFC 7807 problem document schema, used to describe error responses."""

from __future__ import annotations

from marshmallow import Schema, fields


class ProblemSchema(Schema):
    """Problem Details body rendered by :mod:`greeter.core.errors`."""

    type = fields.String(required=True)
    title = fields.String(required=True)
    status = fields.Integer(required=True)
    detail = fields.String(required=True)
    instance = fields.String(allow_none=True)
    code = fields.String(required=True)
    details = fields.Dict()
    request_id = fields.String(required=True)
