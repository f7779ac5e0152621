"""
Decorators
----------

This module defines the decorators that take care of JSON in and out of
the views. Incoming bodies are validated against a schema before the view
runs, and whatever the view returns is dumped through the schema it names.

.. note:: Annotating a route with ``@expects(None)`` or ``@returns(None)``
    is purely for clarity and has no effect.
"""

from functools import wraps
from http import HTTPStatus
from json import JSONDecodeError
from typing import Optional, Tuple, Union

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError
from marshmallow_jsonschema import JSONSchema

from bikerent.serializer.jsend import JSendSchema, JSendStatus, failure

response_schema = JSendSchema()


def _fail(message: str, status=HTTPStatus.BAD_REQUEST, **data):
    """Builds a JSend fail response for input that could not be accepted."""
    return web.json_response(response_schema.dump(failure(message, "ValidationError", **data)), status=status)


def expects(schema: Optional[Schema], into="data"):
    """
    A decorator that asserts that the JSON body supplied
    to the route validates the given :class:`~marshmallow.Schema`.

    If the body is valid, the loaded data is stored on the request
    under the key supplied to ``into``, otherwise a JSend failure
    including the expected json schema is sent back.

    .. code:: python

        @expects(EndRentalSchema())
        async def patch(self):
            location = self.request["data"]["lat"], self.request["data"]["lng"]

    :param schema: The schema to validate.
    :param into: The key to store the validated data in.
    """

    if schema is None:
        return lambda x: x

    if not isinstance(schema, Schema):
        raise TypeError(f"Expected a marshmallow schema, not {type(schema)}")

    json_schema = JSONSchema().dump(schema)["definitions"][type(schema).__name__]

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):

            if not self.request.body_exists or self.request.content_type != "application/json":
                return _fail(
                    f"This route ({self.request.method}: {self.request.rel_url}) only accepts JSON.",
                    schema=json_schema
                )

            try:
                self.request[into] = schema.load(await self.request.json())
            except JSONDecodeError as err:
                return _fail("Could not parse supplied JSON.", errors=list(err.args))
            except ValidationError as err:
                return _fail("The request did not validate properly.", errors=err.messages, schema=json_schema)

            return await original_function(self, **kwargs)

        return new_func

    return decorator


def returns(
    schema: Optional[Schema] = None, return_code: HTTPStatus = HTTPStatus.OK,
    **named_schema: Union[Schema, Tuple[Schema, HTTPStatus]]
):
    """
    A decorator that dumps the data returned from the route
    through a :class:`~marshmallow.Schema`, meaning the route
    can simply return plain python dictionaries.

    When named schemas are given, the route returns a tuple of the
    schema name and the data, and the status code that goes with
    the name is used.

    .. code:: python

        @returns(
            not_found=(JSendSchema(), HTTPStatus.NOT_FOUND),
            rental_ended=JSendSchema.of(rental=RentalSchema())
        )
        async def patch(self):
            return "rental_ended", {
                "status": JSendStatus.SUCCESS,
                "data": {"rental": rental.serialize()}
            }

    :param schema: The schema that the output data must conform to
    :param return_code: The code to return
    :param named_schema: Schema names, paired with their schema and return values.
    """

    if schema is None and not named_schema:
        return lambda x: x

    named_schema[None] = (schema, return_code)

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):

            if schema:
                schema_name, response_data = None, await original_function(self, **kwargs)
            else:
                schema_name, response_data = await original_function(self, **kwargs)

            try:
                matched_schema = named_schema[schema_name]
                if isinstance(matched_schema, tuple):
                    matched_schema, matched_return_code = matched_schema
                else:
                    matched_return_code = return_code
                return web.json_response(matched_schema.dump(response_data), status=matched_return_code)
            except (ValidationError, KeyError) as err:
                return web.json_response(response_schema.dump({
                    "status": JSendStatus.ERROR,
                    "data": err.messages if isinstance(err, ValidationError) else {"errors": list(err.args)},
                    "message": "We tried to send you data back, but it came out wrong.",
                }), status=HTTPStatus.INTERNAL_SERVER_ERROR)

        return new_func

    return decorator
