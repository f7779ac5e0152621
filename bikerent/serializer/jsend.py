"""
JSend Schema
------------

Every response of the rental API (other than the state sync routes) is
wrapped in a `JSend`_ envelope. Successes carry their payload in ``data``,
failures carry a ``message`` for the user and an ``error`` naming the kind
of failure, and errors (our fault) carry a top level ``message``.

.. _`JSend`: https://github.com/omniti-labs/jsend
"""

from enum import Enum
from typing import Any, Dict

from marshmallow import Schema, fields, validates_schema, ValidationError
from marshmallow.fields import Field

from .fields import EnumField


class JSendStatus(str, Enum):
    SUCCESS = "success"
    """The request went through."""

    FAIL = "fail"
    """The request could not be accepted, because of the input or the state of a rental or bike."""

    ERROR = "error"
    """Something broke on our end."""


class JSendSchema(Schema):
    """The JSend envelope."""

    status = EnumField(JSendStatus, required=True)
    data = fields.Dict()
    message = fields.String()
    code = fields.Integer()

    @validates_schema
    def assert_fields(self, data, **kwargs):
        status = data["status"]
        if status in (JSendStatus.SUCCESS, JSendStatus.FAIL) and "data" not in data:
            raise ValidationError(f"A {status.value} response needs a data field.")
        if status == JSendStatus.FAIL and "message" not in data["data"]:
            raise ValidationError("A failure needs a message for the user.")
        if status == JSendStatus.ERROR and "message" not in data:
            raise ValidationError("An error response needs a message.")

    @staticmethod
    def of(**kwargs):
        """
        Creates an envelope whose ``data`` holds the given fields, each either
        a marshmallow field or a schema to nest.

        >>> JSendSchema.of(rental=RentalSchema(), estimated_price=Float())
        """

        DataSchema = type('DataSchema', (Schema,), {
            field_name: fields.Nested(schema) if not isinstance(schema, Field) else schema
            for field_name, schema in kwargs.items()
        })

        class TypedJSendSchema(JSendSchema):
            data = fields.Nested(DataSchema)

        return TypedJSendSchema()


def failure(message: str, error: str, **data: Any) -> Dict[str, Any]:
    """
    Builds the body of a JSend failure.

    :param message: What went wrong, for the user.
    :param error: The kind of failure, such as ``NotFoundError``.
    :param data: Anything else the client can use to recover.
    """
    return {
        "status": JSendStatus.FAIL,
        "data": {"message": message, "error": error, **data},
    }
