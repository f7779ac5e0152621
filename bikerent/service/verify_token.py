"""
Verify Token
------------

Verifies the admin tokens of the fleet management dashboard. A token
is the base64 encoding of ``<admin id>:<anything>``; only the admin id
is checked against the configured administrators.
"""

import binascii
from abc import ABC, abstractmethod
from base64 import b64decode
from typing import Iterable

from aiohttp.web_request import Request


class TokenVerificationError(Exception):
    pass


class TokenVerifier(ABC):

    @abstractmethod
    def verify_token(self, token):
        """
        Given a token, verifies it, returning the admin id or a token verification error.

        :raises TokenVerificationError: When the provided token is invalid.
        """


class AdminTokenVerifier(TokenVerifier):

    def __init__(self, admin_ids: Iterable[str]):
        self.admin_ids = set(admin_ids)

    def verify_token(self, token) -> str:
        if not isinstance(token, str):
            raise TypeError(f"Token must be of type string, not {type(token)}")

        try:
            decoded = b64decode(token, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as error:
            raise TokenVerificationError("Token is not valid base64.") from error

        admin_id = decoded.split(":", 1)[0]
        if admin_id not in self.admin_ids:
            raise TokenVerificationError("Token is invalid.")

        return admin_id


def verify_token(request: Request):
    """
    Checks a request for the existence of a valid Authorization header.

    :param request: The request to check.
    :return: The admin id in the token.
    :raises TokenVerificationError: When the Authorization header is invalid.
    """
    if "Authorization" not in request.headers:
        raise TokenVerificationError("You must supply your admin token.")

    if not request.headers["Authorization"].startswith("Bearer "):
        raise TokenVerificationError("The Authorization header must be of the format \"Bearer $TOKEN\".")

    return request.app["token_verifier"].verify_token(request.headers["Authorization"][7:])
