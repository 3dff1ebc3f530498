"""football-data.org standings client with classified failures and backoff."""
from __future__ import annotations

import re
import time
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import settings
from .config import API_TIMEOUT, MAX_RETRY_COUNT, RATE_LIMIT_RETRY_AFTER, RETRY_DELAY_BASE, setup_logger
from .domain.contracts import StandingsRow
from .errors import RATE_LIMITED, TRANSIENT, UPSTREAM, FetchError

logger = setup_logger(__name__)


def sanitize_error_message(message):
    """
    Remove API keys from error messages to prevent security leaks.
    Handles patterns: apiKey=XXX, X-Auth-Token: XXX
    Supports alphanumeric keys plus common special chars (., -, _)
    """
    if not message:
        return message

    sanitized = re.sub(r'apiKey=[A-Za-z0-9._-]+', 'apiKey=***', str(message))
    sanitized = re.sub(r'X-Auth-Token[:\s]+[A-Za-z0-9._-]+', 'X-Auth-Token: ***', sanitized)

    return sanitized


def _scrub_url(url: Any) -> str:
    if not url:
        return ""
    parts = urlsplit(str(url))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", parts.fragment))


def _parse_retry_after(value: Optional[str]) -> int:
    try:
        seconds = int(str(value).strip())
    except (TypeError, ValueError):
        return RATE_LIMIT_RETRY_AFTER
    return seconds if seconds > 0 else RATE_LIMIT_RETRY_AFTER


def create_session() -> requests.Session:
    """Create a :class:`requests.Session` with adapter-level retries disabled.

    Retries are owned by :meth:`StandingsFetcher.fetch` so every attempt is
    classified and counted there. The adapter pins that explicitly rather
    than relying on the requests default.
    """
    adapter = HTTPAdapter(max_retries=Retry(total=0, connect=0, read=0, raise_on_status=False))
    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def normalize_row(entry: Mapping[str, Any]) -> StandingsRow:
    """Rename an upstream table row into a :class:`StandingsRow`.

    Raises ``KeyError``/``TypeError`` when a field is missing so the caller
    can reject the whole table.
    """
    return {
        "position": entry["position"],
        "team": entry["team"]["name"],
        "played": entry["playedGames"],
        "won": entry["won"],
        "drawn": entry["draw"],
        "lost": entry["lost"],
        "gf": entry["goalsFor"],
        "ga": entry["goalsAgainst"],
        "gd": entry["goalDifference"],
        "points": entry["points"],
    }


def normalize_standings(payload: Any, competition_code: str = "") -> List[StandingsRow]:
    """Extract the overall table from a standings response body."""
    try:
        groups = payload["standings"]
        table = None
        for group in groups:
            if group.get("type") == "TOTAL":
                table = group["table"]
                break
        if table is None:
            table = groups[0]["table"]
        rows = [normalize_row(entry) for entry in table]
        rows.sort(key=lambda row: row["position"])
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise FetchError(
            UPSTREAM,
            f"Malformed standings response for {competition_code}",
            code="MALFORMED",
            details=type(exc).__name__,
        ) from exc
    return rows


class StandingsFetcher:
    """Fetches one competition table per call.

    Rate limits and HTTP errors are raised immediately; transport failures
    are retried up to ``max_retries`` times, sleeping ``RETRY_DELAY_BASE ** n``
    seconds after failed attempt ``n``.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = API_TIMEOUT,
        max_retries: int = MAX_RETRY_COUNT,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.api_key = settings.FOOTBALL_DATA_API_KEY if api_key is None else api_key
        self.base_url = (base_url or settings.FOOTBALL_DATA_BASE).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session or create_session()
        self._sleep = sleep

    def standings_url(self, competition_code: str) -> str:
        return f"{self.base_url}/competitions/{competition_code}/standings"

    def _attempt(self, competition_code: str) -> List[StandingsRow]:
        url = self.standings_url(competition_code)
        headers = {"X-Auth-Token": self.api_key or ""}
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise FetchError(
                TRANSIENT,
                f"football-data.org connection error for {competition_code}: "
                f"{sanitize_error_message(str(exc))}",
                code=type(exc).__name__.upper(),
            ) from exc

        if response.status_code == 429:
            retry_after = _parse_retry_after(response.headers.get("Retry-After"))
            logger.warning(
                "⏳ Rate limit hit for %s (retry after %ss)", competition_code, retry_after
            )
            raise FetchError(
                RATE_LIMITED,
                "API rate limit exceeded",
                code="429",
                details="rate_limited",
                retry_after=retry_after,
            )

        if not 200 <= response.status_code < 300:
            logger.error(
                "❌ football-data.org error for %s: HTTP %s",
                _scrub_url(url),
                response.status_code,
            )
            raise FetchError(
                UPSTREAM,
                f"Failed to fetch data: {response.status_code}",
                code=str(response.status_code),
            )

        try:
            payload: Dict[str, Any] = response.json()
        except ValueError as exc:
            raise FetchError(
                UPSTREAM,
                f"Malformed standings response for {competition_code}",
                code="MALFORMED",
                details="invalid_json",
            ) from exc

        return normalize_standings(payload, competition_code)

    def fetch(self, competition_code: str) -> List[StandingsRow]:
        attempt = 0
        while True:
            try:
                rows = self._attempt(competition_code)
            except FetchError as exc:
                if not exc.retryable or attempt >= self.max_retries:
                    raise
                delay = RETRY_DELAY_BASE ** attempt
                logger.warning(
                    "Retrying fetch for %s (%d/%d) in %ss: %s",
                    competition_code,
                    attempt + 1,
                    self.max_retries,
                    delay,
                    exc.message,
                )
                self._sleep(delay)
                attempt += 1
                continue
            logger.info("Fetched %d standings rows for %s", len(rows), competition_code)
            return rows
