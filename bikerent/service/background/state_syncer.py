import asyncio
from datetime import timedelta

from bikerent import logger
from bikerent.service.manager.state_manager import StateManager


class StateSyncer:
    """
    This background service keeps trying to push a state
    that was only saved locally until the remote accepts it.
    """

    def __init__(self, state_manager: StateManager):
        self._state_manager = state_manager

    async def run(self, interval: timedelta = None):
        """Retries a failed push at most once every ``interval``."""
        if interval is None:
            interval = timedelta(minutes=1)

        while True:
            await asyncio.sleep(interval.total_seconds())
            await self.sync_once()

    async def sync_once(self) -> bool:
        """
        Pushes the state if the last push failed.

        :return: Whether the remote is up to date.
        """
        if not self._state_manager.dirty:
            return True

        async with self._state_manager.lock:
            synced = await self._state_manager.push()

        if synced:
            logger.info("Local changes synced to the remote")
        return synced
