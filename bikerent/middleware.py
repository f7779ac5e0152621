"""
Middleware
----------
"""

from http import HTTPStatus

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from bikerent.serializer import JSendSchema, failure
from bikerent.service.verify_token import verify_token, TokenVerificationError

response_schema = JSendSchema()


@middleware
async def validate_token_middleware(request: Request, handler):
    """
    Rejects requests with an Authorization header that does not carry an admin
    token. For the rest, the admin id (or None) is stored on the request as ``token``.
    """

    request["token"] = None
    if "Authorization" in request.headers:
        try:
            request["token"] = verify_token(request)
        except TokenVerificationError as error:
            return web.json_response(
                response_schema.dump(failure(
                    "Supplied authorization token is invalid.", "Unauthorized", errors=list(error.args)
                )),
                status=HTTPStatus.UNAUTHORIZED
            )

    return await handler(request)
