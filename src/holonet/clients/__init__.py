"""API client layer for HOLONET.

Async HTTP clients for fetching public Star Wars data from SWAPI.
"""

from holonet.clients.base import (
    APIProviderError,
    BaseAsyncClient,
    HTTPStatusError,
    NetworkError,
    ParseError,
    RequestTimeoutError,
)
from holonet.clients.swapi import SwapiClient

__all__ = [
    "BaseAsyncClient",
    "APIProviderError",
    "NetworkError",
    "RequestTimeoutError",
    "HTTPStatusError",
    "ParseError",
    "SwapiClient",
]
