"""
Signals
-------

Defines a number of signals that the aiohttp server uses
to facilitate some of the advanced functionality.

Each signal must accept an the ``app`` argument.
"""
import asyncio
from asyncio import CancelledError
from contextlib import suppress
from datetime import timedelta

from aiohttp.abc import Application

from bikerent import logger
from bikerent.service.rebuildable import Rebuildable


async def rebuild_event_states(app: Application):
    """Rebuilds the in-memory state from the store."""
    for rebuildable in (x for x in app.values() if isinstance(x, Rebuildable)):
        await rebuildable._rebuild()


async def start_background_tasks(app: Application):
    """Starts the background tasks."""
    logger.info("Starting Background Tasks")
    loop = asyncio.get_event_loop()

    if app["state_manager"].sync is not None:
        app["state_syncer_task"] = loop.create_task(
            app["state_syncer"].run(timedelta(seconds=app["sync_interval"]))
        )


async def stop_background_tasks(app: Application):
    """
    Stops the background tasks.

    .. note: We suppress CancelledError so that coroutines that do not handle it don't cause issues.
    """
    task = app.get("state_syncer_task")
    if task is not None:
        task.cancel()
        with suppress(CancelledError):
            await task


async def close_sync_session(app: Application):
    """Makes one last attempt at pushing local changes, then closes the connection to the remote."""
    sync = app["state_manager"].sync
    if sync is None:
        return

    await app["state_syncer"].sync_once()
    await sync.close()


def register_signals(app):
    """Registers all the signals at the appropriate hooks."""
    app.on_startup.append(rebuild_event_states)  # we deliberately rebuild the state
    app.on_startup.append(start_background_tasks)  # before starting the background tasks

    app.on_cleanup.append(stop_background_tasks)
    app.on_cleanup.append(close_sync_session)
