"""Orchestrator — sequential fetch-and-display run.

One run performs, strictly in order:
  1. Character ``people/{cursor}``
  2. Starships ``starships/?page=1``
  3. Planets ``planets/?page=1``
  4. Films ``films/``
  5. Vehicle ``vehicles/{cursor}`` (only while cursor <= cursor_limit), then
     the cursor advances by one

The first failure aborts the rest of the run. Failures are logged and
counted, never raised.

Every successful step adds its compact JSON size to ``total_bytes``, cache
hits included, so a fully cached run still grows the byte counter.
``Fetcher.fetch`` on its own never changes it; only a run does.

Usage:
    orchestrator = Orchestrator()
    await orchestrator.run()
    print(orchestrator.state.counters.to_dict())
"""

import asyncio
import json
import logging
from typing import Any, Callable, Iterable

from holonet.config import Settings, settings as default_settings
from holonet.display import (
    format_character,
    format_films,
    format_planets,
    format_starships,
    format_stats,
    format_vehicle,
    show,
)
from holonet.pipeline.fetcher import Fetcher
from holonet.pipeline.state import RunState

logger = logging.getLogger(__name__)

STARSHIPS_PATH = "starships/?page=1"
PLANETS_PATH = "planets/?page=1"
FILMS_PATH = "films/"


def payload_size(data: Any) -> int:
    """Byte size of the compact JSON serialization of ``data`` (UTF-8)."""
    return len(json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))


class Orchestrator:
    """Runs the five-step fetch-and-display sequence.

    Runs are serialized: a second ``run()`` started while one is in flight
    waits for the first to finish, so counters and cursor never interleave.

    Args:
        settings: Configuration (default: global settings)
        state: Shared run state (default: the fetcher's, or a fresh one)
        fetcher: Resource fetcher (default: one bound to ``state``)
        display: Sink for formatted lines (default: the display logger)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        state: RunState | None = None,
        fetcher: Fetcher | None = None,
        display: Callable[[Iterable[str]], None] | None = None,
    ) -> None:
        self.settings = settings or default_settings
        if state is None:
            state = fetcher.state if fetcher is not None else RunState()
        self.state = state
        self.fetcher = fetcher or Fetcher(state=self.state, settings=self.settings)
        self.display = display or show
        self._lock = asyncio.Lock()

    async def run(self) -> None:
        """Perform one complete run. Never raises."""
        async with self._lock:
            await self._run()

    async def _run(self) -> None:
        state = self.state
        counters = state.counters

        logger.info("Starting data fetch...")
        counters.runs += 1

        try:
            await self._step(f"people/{state.cursor}", format_character)
            await self._step(STARSHIPS_PATH, format_starships)
            await self._step(PLANETS_PATH, format_planets)
            await self._step(FILMS_PATH, format_films)

            if state.cursor <= self.settings.cursor_limit:
                await self._step(f"vehicles/{state.cursor}", format_vehicle)
                state.cursor += 1

        except Exception as e:
            # The fetcher has already counted its own failure; the abort
            # is counted again here.
            logger.error("Error: %s", e)
            counters.errors += 1
            return

        if self.settings.debug:
            self.display(format_stats(cache_size=len(state.cache), **counters.to_dict()))

    async def _step(self, path: str, formatter: Callable[[Any], list[str]]) -> None:
        """Fetch one resource, account for its size, then display it."""
        data = await self.fetcher.fetch(path)
        self.state.counters.total_bytes += payload_size(data)
        self.display(formatter(data))
