from typing import List

from bikerent.models import AppState
from bikerent.store.persistent_store import PersistentStore


class MemoryStore(PersistentStore):
    """
    Emulates a state file by keeping the state in memory.
    Every saved state is kept so tests can inspect the history.
    """

    def __init__(self, state: AppState = None):
        self.state = state if state is not None else AppState()
        self.saved: List[AppState] = []

    def load(self) -> AppState:
        return self.state

    def save(self, state: AppState):
        self.state = state
        self.saved.append(state)
