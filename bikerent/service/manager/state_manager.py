"""
State Manager
-------------

The state manager owns the one application state value. It is the
only place that value is replaced, and it keeps the persistent store
and the remote authority (when there is one) up to date.

Responsibilities
================

- loading the state on startup
- replacing the state as a whole and saving it
- pushing the state to the remote, and remembering when that failed
"""

import asyncio
from typing import Optional

from bikerent import logger
from bikerent.models import AppState
from bikerent.service.exceptions import SyncError, StateLoadError
from bikerent.service.rebuildable import Rebuildable
from bikerent.store.json_store import default_state
from bikerent.store.persistent_store import PersistentStore


class StateManager(Rebuildable):
    """
    Holds the current :class:`~bikerent.models.AppState`.

    Writers take :attr:`lock` before reading the state they intend to
    replace, so that there is only ever one writer at a time.
    """

    def __init__(self, store: PersistentStore, sync=None):
        self._store = store
        self._sync = sync
        self._state = AppState()
        self.lock = asyncio.Lock()
        self.dirty = False
        """Set when the last push to the remote failed."""

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def sync(self):
        return self._sync

    def replace(self, state: AppState):
        """
        Swaps in a new state and saves it locally.
        A failed save is logged; the in-memory state is still replaced.
        """
        self._state = state
        try:
            self._store.save(state)
        except OSError:
            logger.exception("Could not save the state")

    def stage(self, state: AppState):
        """
        Replaces the state and saves it locally, leaving the push to the
        state syncer. For changes that must not hold up the caller.
        """
        self.replace(state)
        if self._sync is not None:
            self.dirty = True

    async def commit(self, state: AppState):
        """Replaces the state, then mirrors it to the remote if one is configured."""
        self.replace(state)
        self.dirty = True
        await self.push()

    async def push(self) -> bool:
        """
        Pushes the current state to the remote.

        :return: Whether the remote now holds the current state.
        """
        if self._sync is None:
            self.dirty = False
            return True

        try:
            await self._sync.push(self._state)
        except SyncError as error:
            logger.warning("State saved locally only, will sync later: %s", error)
            self.dirty = True
            return False

        self.dirty = False
        return True

    async def pull(self) -> Optional[AppState]:
        """Replaces the local state with the remote one, if the remote can be reached."""
        if self._sync is None:
            return None

        try:
            state = await self._sync.pull()
        except SyncError as error:
            logger.warning("Could not pull the state, keeping the local copy: %s", error)
            return None

        self.replace(state)
        return state

    async def _rebuild(self):
        try:
            self._state = self._store.load()
        except StateLoadError:
            logger.exception("Falling back to the default state")
            self._state = default_state()

        await self.pull()
        logger.info(
            "Loaded %s bikes, %s parking zones and %s rentals",
            len(self._state.bikes), len(self._state.parking_zones), len(self._state.rentals)
        )
