"""Star Wars API (SWAPI) client.

Provides async access to SWAPI resources:
- People, starships, planets, films, vehicles

API Documentation: https://swapi.dev/documentation

Usage:
    from holonet.clients.swapi import SwapiClient

    async with SwapiClient(timeout=5.0) as client:
        luke = await client.get_resource("people/1")
"""

from typing import Any

from holonet.clients.base import BaseAsyncClient
from holonet.config import settings


class SwapiClient(BaseAsyncClient):
    """Async client for the Star Wars API.

    Args:
        timeout: Request timeout in seconds (default: from settings)
        base_url: API root (default: from settings)
        verify: Validate TLS certificates (default: from settings)
    """

    def __init__(
        self,
        timeout: float | None = None,
        base_url: str | None = None,
        verify: bool | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url or settings.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            verify=settings.verify_tls if verify is None else verify,
        )

    async def get_resource(self, path: str) -> Any:
        """Get a resource by its path relative to the API root.

        Args:
            path: Resource path, e.g. "people/1" or "starships/?page=1".
                A query string embedded in the path is sent as-is.

        Returns:
            Parsed JSON document (usually a dict; list pages carry
            ``count`` and ``results``)
        """
        return await self.get(path)
