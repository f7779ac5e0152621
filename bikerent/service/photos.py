"""
Photos
------

Return photos are copied into the server's own storage before a
rental is closed, so that a rental never points at a file that
only existed on the client.
"""

import asyncio
import os
import shutil
from urllib.parse import urlparse

from bikerent import logger
from bikerent.models.util import now_ms
from bikerent.service.exceptions import PhotoStorageError

REMOTE_SCHEMES = {"http", "https"}


class PhotoStore:

    def __init__(self, photos_dir: str):
        self.photos_dir = photos_dir

    async def persist(self, source_ref: str, prefix: str = "photo") -> str:
        """
        Copies a photo into the photo directory.

        Photos that already live on a server are kept where they are.

        :param source_ref: A local path or ``file://`` uri of the photo.
        :param prefix: The start of the stored file's name.
        :return: The path of the stored photo.
        :raises PhotoStorageError: If the photo could not be copied.
        """
        parsed = urlparse(source_ref)
        if parsed.scheme in REMOTE_SCHEMES:
            return source_ref

        source = parsed.path if parsed.scheme == "file" else source_ref
        extension = os.path.splitext(source)[1].lstrip(".") or "jpg"
        target = os.path.join(self.photos_dir, f"{prefix}_{now_ms()}.{extension}")

        loop = asyncio.get_event_loop()
        try:
            await loop.run_in_executor(None, self._copy, source, target)
        except OSError as error:
            raise PhotoStorageError(f"Could not store the photo {source_ref}: {error}") from error

        logger.debug("Stored photo %s as %s", source_ref, target)
        return target

    def _copy(self, source: str, target: str):
        os.makedirs(self.photos_dir, exist_ok=True)
        shutil.copyfile(source, target)
