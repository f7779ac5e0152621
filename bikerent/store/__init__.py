"""
The store package holds the persistence collaborators of the
state manager. A store only ever loads and saves the whole state.
"""

from .json_store import JsonFileStore
from .memory import MemoryStore
from .persistent_store import PersistentStore
