"""In-memory response cache keyed by resource path.

Stores parsed JSON documents for the lifetime of the owning process (or of
the RunState that owns the store in tests). Entries are never evicted,
invalidated, or overwritten: the resource path space is small and the data
behind it is static.
"""

import logging
from typing import Any, Iterator

logger = logging.getLogger(__name__)


class MemoryStore:
    """Unbounded path -> JSON cache.

    Usage:
        store = MemoryStore()
        store.put("films/", {"count": 6, "results": [...]})
        if "films/" in store:
            films = store.get("films/")
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, path: str) -> Any:
        """Return the cached document for ``path``.

        Raises:
            KeyError: If the path has not been cached
        """
        return self._entries[path]

    def put(self, path: str, value: Any) -> None:
        """Cache ``value`` under ``path``.

        Raises:
            ValueError: If the path is already cached
        """
        if path in self._entries:
            raise ValueError(f"Resource already cached: {path}")
        self._entries[path] = value
        logger.debug("Cached %s (%d entries)", path, len(self._entries))
