"""
Services that hold state in memory subclass :class:`Rebuildable`. Every
rebuildable service stored on the app is rebuilt when the app starts,
before any request is handled.
"""

from abc import ABC, abstractmethod


class Rebuildable(ABC):

    @abstractmethod
    async def _rebuild(self):
        """Restores the in-memory state from wherever it is kept."""
