"""
Sync Views
----------

The state sync surface the mobile clients (and other servers' sync
bridges) talk to. Unlike the rest of the API these routes speak the
plain state format rather than JSend:

- ``GET /api/state`` answers with the whole state
- ``PUT /api/state`` replaces the whole state
- ``POST /api/upload`` stores a multipart ``file`` under its ``kind``
  and answers with the url it is served from
"""

import asyncio
import os
import re
from http import HTTPStatus
from json import JSONDecodeError
from random import randint

from aiohttp import web
from aiohttp.web_request import FileField
from aiohttp_apispec import docs
from marshmallow import ValidationError

from bikerent import logger
from bikerent.models.util import now_ms
from bikerent.serializer.state import AppStateSchema
from bikerent.service.access import find_duplicates
from bikerent.views.base import BaseView

KIND_REGEX = re.compile(r"^[A-Za-z0-9_-]+$")

state_schema = AppStateSchema()


def error_response(message, status=HTTPStatus.BAD_REQUEST):
    return web.json_response({"error": message}, status=status)


class StateView(BaseView):
    url = "/state"
    name = "state"

    @docs(summary="Get The Whole State")
    async def get(self):
        return web.json_response(state_schema.dump(self.state))

    @docs(summary="Replace The Whole State")
    async def put(self):
        """
        Replaces the state with the one sent by a client. States in which two
        users share a username or an email (ignoring case) are refused.
        """
        try:
            state = state_schema.load(await self.request.json())
        except JSONDecodeError:
            return error_response("Invalid state")
        except ValidationError as error:
            return web.json_response({"error": "Invalid state", "errors": error.messages}, status=HTTPStatus.BAD_REQUEST)

        duplicate = find_duplicates(state.users)
        if duplicate is not None:
            return error_response(duplicate)

        async with self.state_manager.lock:
            await self.state_manager.commit(state)

        logger.info("State replaced by a client (%s rentals)", len(state.rentals))
        return web.json_response({"success": True})


class UploadView(BaseView):
    url = "/upload"
    name = "upload"

    @docs(summary="Upload A File")
    async def post(self):
        try:
            form = await self.request.post()
        except ValueError:
            return error_response("No file uploaded")

        upload = form.get("file")
        if not isinstance(upload, FileField):
            return error_response("No file uploaded")

        kind = form.get("kind") or "general"
        if not isinstance(kind, str) or not KIND_REGEX.match(kind):
            return error_response(f"Invalid kind {kind}")

        extension = os.path.splitext(upload.filename or "")[1] or ".jpg"
        filename = f"{now_ms()}-{randint(0, 10 ** 9)}{extension}"
        directory = os.path.join(self.request.app["uploads_dir"], kind)

        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, self._save, upload.file, directory, filename)

        url = f"{self.request.url.origin()}/uploads/{kind}/{filename}"
        logger.info("Stored upload %s", url)
        return web.json_response({"url": url})

    @staticmethod
    def _save(source, directory, filename):
        os.makedirs(directory, exist_ok=True)
        with open(os.path.join(directory, filename), "wb") as target:
            target.write(source.read())
