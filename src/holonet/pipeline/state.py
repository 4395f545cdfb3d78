"""Run state shared by the Fetcher and Orchestrator.

Counters, cursor and cache live on one object instead of module globals,
so each server (or test) gets its own isolated state.
"""

from dataclasses import dataclass, field

from holonet.cache import MemoryStore


@dataclass
class RunCounters:
    """Monotonic counters for the life of a RunState."""

    runs: int = 0
    total_bytes: int = 0
    errors: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "runs": self.runs,
            "total_bytes": self.total_bytes,
            "errors": self.errors,
        }


@dataclass
class RunState:
    """Everything a run reads and mutates.

    Attributes:
        cache: Resource path -> parsed JSON
        counters: Run/byte/error counters
        cursor: Next character/vehicle number; only ever increases
    """

    cache: MemoryStore = field(default_factory=MemoryStore)
    counters: RunCounters = field(default_factory=RunCounters)
    cursor: int = 1
