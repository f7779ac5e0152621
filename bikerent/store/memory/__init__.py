"""
An in-memory store, used by the tests. It remembers every state it was given.
"""

from .store import MemoryStore
