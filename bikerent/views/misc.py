import os
from pathlib import Path

from aiohttp import web

STATIC_FOLDER = Path(os.path.dirname(__file__)).parent / "static"


async def redoc(request):
    """Serves the ReDoc page for the API docs."""
    return web.FileResponse(STATIC_FOLDER / "redoc.html")
