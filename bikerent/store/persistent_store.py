"""
The state is persisted as a whole: a store hands back the last saved
:class:`~bikerent.models.AppState` and replaces it on save. Both calls are
synchronous and only ever made by the state manager.
"""

from abc import ABC, abstractmethod

from bikerent.models import AppState


class PersistentStore(ABC):
    """The abstract store interface."""

    @abstractmethod
    def load(self) -> AppState:
        """
        Loads the stored state.

        :raises StateLoadError: When the stored state exists but is unreadable.
        """

    @abstractmethod
    def save(self, state: AppState):
        """Replaces the stored state with the given one."""
