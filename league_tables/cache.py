"""In-memory standings cache with a freshness window and stale fallback."""
from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from .config import CACHE_DURATION_SECONDS
from .domain.contracts import StandingsRow


@dataclass(frozen=True)
class CacheEntry:
    league_key: str
    rows: Tuple[StandingsRow, ...]
    fetched_at: float


class StandingsCache:
    """Holds the last good table per league.

    Entries older than ``ttl_seconds`` are stale but never evicted, so they
    can still be served when a live fetch fails.
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_DURATION_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, league_key: str) -> Optional[CacheEntry]:
        with self._lock:
            return self._entries.get(league_key)

    def put(self, league_key: str, rows: Iterable[StandingsRow]) -> CacheEntry:
        entry = CacheEntry(league_key=league_key, rows=tuple(rows), fetched_at=self._clock())
        with self._lock:
            self._entries[league_key] = entry
        return entry

    def is_fresh(self, entry: CacheEntry) -> bool:
        return (self._clock() - entry.fetched_at) < self.ttl_seconds

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
