"""Base async HTTP client with typed failures and a hard per-request timeout.

All API clients inherit from this base to ensure consistent behavior:
- Async/await for non-blocking I/O
- One attempt per request (no retries)
- Timeout bounding the whole request, body included
- Every failure surfaced as an APIProviderError subclass

Usage:
    class MyAPIClient(BaseAsyncClient):
        def __init__(self, timeout: float = 5.0):
            super().__init__(base_url="https://api.example.com", timeout=timeout)

        async def get_data(self, item: str) -> dict:
            return await self._request("GET", f"/data/{item}")
"""

import asyncio
import logging
from typing import Any

import httpx


logger = logging.getLogger(__name__)


class APIProviderError(Exception):
    """Base exception for API provider errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.path = path


class NetworkError(APIProviderError):
    """Connection-level failure (DNS, refused, reset, TLS)."""


class RequestTimeoutError(APIProviderError):
    """No complete response within the configured timeout."""


class HTTPStatusError(APIProviderError):
    """Response status was 400 or above. The body is left unread."""


class ParseError(APIProviderError):
    """Response body was not valid JSON."""


class BaseAsyncClient:
    """Base async HTTP client.

    Args:
        base_url: Base URL for all API requests
        headers: Default headers for all requests
        timeout: Request timeout in seconds (default: 5)
        verify: Validate the server's TLS certificate (default: False)
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 5.0,
        verify: bool = False,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = headers or {}
        self.timeout = timeout
        self.verify = verify
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BaseAsyncClient":
        """Async context manager entry."""
        if not self.verify:
            logger.warning(
                "TLS certificate verification is disabled for %s", self.base_url
            )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            verify=self.verify,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _send(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None,
    ) -> Any:
        """Send one request and decode the JSON body.

        The response is streamed so that error responses can be closed
        without reading their body.
        """
        request = self._client.build_request(method, endpoint, params=params)
        response = await self._client.send(request, stream=True)
        try:
            logger.debug("Response: %d for %s", response.status_code, endpoint)

            if response.status_code >= 400:
                logger.error(
                    "API error: request for %s%s failed with status code %d",
                    self.base_url, endpoint, response.status_code,
                )
                raise HTTPStatusError(
                    message=f"Request failed with status code {response.status_code}",
                    status_code=response.status_code,
                    path=endpoint,
                )

            await response.aread()
        finally:
            await response.aclose()

        try:
            return response.json()
        except ValueError as e:
            logger.error("Failed to parse JSON from %s%s: %s", self.base_url, endpoint, e)
            raise ParseError(
                message=f"Invalid JSON response: {e}",
                status_code=response.status_code,
                path=endpoint,
            ) from e

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a single HTTP request bounded by the client timeout.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path (relative to base_url)
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            RequestTimeoutError: No full response within ``timeout`` seconds
            NetworkError: Connection-level or other transport failure
            HTTPStatusError: Status code >= 400
            ParseError: Body cannot be decoded or is not valid JSON
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with context manager.")

        # Ensure endpoint starts with /
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"

        logger.debug("%s %s%s params=%s", method, self.base_url, endpoint, params)

        try:
            return await asyncio.wait_for(
                self._send(method, endpoint, params),
                timeout=self.timeout,
            )

        except (TimeoutError, httpx.TimeoutException) as e:
            logger.error("Request timeout for %s%s", self.base_url, endpoint)
            raise RequestTimeoutError(
                f"Request timeout for {endpoint}", path=endpoint
            ) from e

        except httpx.DecodingError as e:
            logger.error("Failed to decode body from %s%s: %s", self.base_url, endpoint, e)
            raise ParseError(f"Invalid response body: {e}", path=endpoint) from e

        except httpx.TransportError as e:
            logger.error("Request error for %s%s: %s", self.base_url, endpoint, e)
            raise NetworkError(f"Network error: {e}", path=endpoint) from e

        except httpx.HTTPError as e:
            logger.error("Unexpected error for %s%s: %s", self.base_url, endpoint, e)
            raise NetworkError(f"Unexpected error: {e}", path=endpoint) from e

    async def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Convenience method for GET requests."""
        return await self._request("GET", endpoint, params=params)
