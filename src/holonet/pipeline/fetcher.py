"""Fetcher — SWAPI → in-memory cache.

Returns cached documents when present, otherwise performs exactly one GET
through an ephemeral SwapiClient and caches the parsed result.
"""

import logging
from typing import Any

from holonet.clients import APIProviderError, SwapiClient
from holonet.config import Settings, settings as default_settings
from holonet.pipeline.state import RunState

logger = logging.getLogger(__name__)


class Fetcher:
    """Fetches SWAPI resources through the shared cache.

    A client is created as an async context manager per network fetch, so
    cache hits never open a connection.

    Usage:
        fetcher = Fetcher(state=RunState())
        luke = await fetcher.fetch("people/1")
        again = await fetcher.fetch("people/1")  # served from cache
        assert again is luke
    """

    def __init__(
        self,
        state: RunState | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            state: Run state holding the cache and counters (default: fresh)
            settings: Configuration (default: global settings)
        """
        self.state = state or RunState()
        self.settings = settings or default_settings

    async def fetch(self, path: str) -> Any:
        """Fetch one resource, using the cache when possible.

        Args:
            path: Resource path relative to the API root

        Returns:
            Parsed JSON document

        Raises:
            APIProviderError: Network, timeout, HTTP status or parse failure.
                The error counter is incremented once before raising.
        """
        cache = self.state.cache
        if path in cache:
            logger.debug("Using cached data for %s", path)
            return cache.get(path)

        try:
            async with SwapiClient(
                timeout=self.settings.request_timeout,
                base_url=self.settings.base_url,
                verify=self.settings.verify_tls,
            ) as client:
                data = await client.get_resource(path)
        except APIProviderError:
            self.state.counters.errors += 1
            raise

        # Another fetch of the same path may have finished while we awaited
        if path in cache:
            logger.debug("Keeping concurrently cached data for %s", path)
            return cache.get(path)

        cache.put(path, data)
        logger.debug("Successfully fetched and cached %s", path)
        logger.debug("Cache size: %d", len(cache))
        return data
