"""In-memory response cache for HOLONET.

Process-lifetime storage of parsed SWAPI documents keyed by resource path.
"""

from holonet.cache.memory_store import MemoryStore

__all__ = ["MemoryStore"]
