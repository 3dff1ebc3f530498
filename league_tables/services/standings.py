from __future__ import annotations

from typing import List, Optional, Protocol

from ..cache import StandingsCache
from ..config import CACHE_DURATION_SECONDS, setup_logger
from ..domain.contracts import StandingsRow
from ..domain.results import Err, Ok, StandingsResult
from ..errors import NOT_FOUND, FetchError
from ..leagues import LeagueCatalog, LeagueDescriptor
from ..logging_utils import RateLimitedLogger

logger = setup_logger(__name__)


class Fetcher(Protocol):
    def fetch(self, competition_code: str) -> List[StandingsRow]:
        ...


class StandingsService:
    """
    Serves league tables: fresh cache first, then a live fetch, then any
    stale entry as a fallback, and finally the classified failure.
    """

    def __init__(self, leagues: LeagueCatalog, fetcher: Fetcher, cache: Optional[StandingsCache] = None):
        self.leagues = leagues
        self.fetcher = fetcher
        self.cache = cache if cache is not None else StandingsCache()
        # One stale/failure warning per league and kind per freshness window.
        self._failure_log = RateLimitedLogger(logger, window_seconds=CACHE_DURATION_SECONDS)

    def list_leagues(self) -> List[LeagueDescriptor]:
        return self.leagues.all()

    def get_league(self, league_key: str) -> Optional[LeagueDescriptor]:
        return self.leagues.get(league_key)

    def get_standings(self, league_key: str) -> StandingsResult:
        league = self.leagues.get(league_key)
        if league is None:
            return Err(NOT_FOUND, "League not found")

        entry = self.cache.get(league.slug)
        if entry is not None and self.cache.is_fresh(entry):
            logger.debug("standings cache hit: %s", league.slug)
            return Ok(entry.rows, cached=True, cached_at=entry.fetched_at)

        try:
            rows = self.fetcher.fetch(league.api_code)
        except FetchError as exc:
            # Re-read: a concurrent request may have stored an entry meanwhile.
            entry = self.cache.get(league.slug)
            if entry is not None:
                self._failure_log.warning(
                    ("stale", league.slug, exc.kind),
                    "Serving stale standings for %s (%s): %s",
                    league.slug,
                    exc.kind,
                    exc.message,
                )
                return Ok(
                    entry.rows,
                    cached=True,
                    cached_at=entry.fetched_at,
                    stale=True,
                    warning=exc.message,
                )
            self._failure_log.error(
                ("unavailable", league.slug, exc.kind),
                "Standings unavailable for %s (%s): %s",
                league.slug,
                exc.kind,
                exc.message,
            )
            return Err.from_error(exc)

        entry = self.cache.put(league.slug, rows)
        return Ok(entry.rows, cached=False)
