"""
Sync Bridge
-----------

Mirrors the application state to a remote state authority, the same
server the mobile clients sync with. The remote speaks the plain state
format: ``GET /api/state`` and ``PUT /api/state`` carry the whole state,
and ``POST /api/upload`` stores a file and answers with its url.

Every call goes through a circuit breaker so that a remote that is down
fails fast instead of holding up the rentals that are waiting on it.
"""

import asyncio
import os
from datetime import timedelta

from aiobreaker import CircuitBreaker, CircuitBreakerError
from aiohttp import ClientSession, ClientError, ClientTimeout, FormData
from marshmallow import ValidationError

from bikerent import logger
from bikerent.models import AppState
from bikerent.serializer.state import AppStateSchema
from bikerent.service.exceptions import SyncError

REQUEST_TIMEOUT = ClientTimeout(total=12)
"""Matches the timeout the mobile clients use."""

state_schema = AppStateSchema()


class SyncBridge:

    def __init__(self, base_url: str, *, fail_max: int = 5, reset_timeout: timedelta = timedelta(minutes=1)):
        self.base_url = base_url.rstrip("/")
        self.breaker = CircuitBreaker(fail_max=fail_max, timeout_duration=reset_timeout)
        self._session = None

    @property
    def session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=REQUEST_TIMEOUT)
        return self._session

    async def close(self):
        if self._session is not None:
            await self._session.close()

    async def pull(self) -> AppState:
        """
        Gets the state held by the remote.

        :raises SyncError: If the remote could not be reached or sent an invalid state.
        """
        data = await self._call(self._request, "GET", "/api/state")
        try:
            return state_schema.load(data)
        except ValidationError as error:
            raise SyncError(f"The remote sent an invalid state: {error.messages}") from error

    async def push(self, state: AppState):
        """
        Replaces the state held by the remote.

        :raises SyncError: If the remote could not be reached or refused the state.
        """
        await self._call(self._request, "PUT", "/api/state", json=state_schema.dump(state))
        logger.debug("Pushed state to %s", self.base_url)

    async def upload_photo(self, local_ref: str, kind: str) -> str:
        """
        Uploads a stored photo to the remote.

        :return: The url the remote serves the photo from.
        :raises SyncError: If the photo could not be read or uploaded.
        """
        try:
            with open(local_ref, "rb") as photo:
                content = photo.read()
        except OSError as error:
            raise SyncError(f"Could not read {local_ref}: {error}") from error

        filename = os.path.basename(local_ref)
        form = FormData()
        form.add_field("file", content, filename=filename,
                       content_type="image/png" if filename.endswith(".png") else "image/jpeg")
        form.add_field("kind", kind)

        data = await self._call(self._request, "POST", "/api/upload", data=form)
        if not isinstance(data, dict) or "url" not in data:
            raise SyncError("The remote did not answer the upload with a url.")
        return data["url"]

    async def _call(self, function, *args, **kwargs):
        try:
            return await self.breaker.call_async(function, *args, **kwargs)
        except CircuitBreakerError as error:
            raise SyncError(f"The remote at {self.base_url} is unavailable.") from error

    async def _request(self, method: str, path: str, **kwargs):
        try:
            async with self.session.request(method, self.base_url + path, **kwargs) as response:
                if response.status >= 400:
                    text = await response.text()
                    raise SyncError(text or f"HTTP {response.status}")
                return await response.json(content_type=None)
        except (ClientError, ValueError, asyncio.TimeoutError) as error:
            raise SyncError(f"{method} {path} failed: {error}") from error
