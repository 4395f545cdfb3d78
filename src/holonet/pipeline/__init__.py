"""Data pipeline — SWAPI → Cache → Display.

The pipeline coordinates one run:
1. Fetch each resource (cache first, then the API)
2. Account for payload size
3. Format and display the payload

Components:
- Orchestrator: Main coordinator
- Fetcher: API → in-memory cache
- RunState: Cache, counters and cursor shared across runs
"""

from holonet.pipeline.orchestrator import Orchestrator
from holonet.pipeline.fetcher import Fetcher
from holonet.pipeline.state import RunCounters, RunState

__all__ = ["Orchestrator", "Fetcher", "RunCounters", "RunState"]
