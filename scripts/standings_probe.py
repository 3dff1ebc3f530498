"""Developer-only football-data.org standings probe.

Fetches the current table for one or more leagues through the same
fetcher the service uses and prints it with qualification zones. Accepts
league slugs (``premier-league``) or competition codes (``PL``).

Usage::

    python -m scripts.standings_probe premier-league BL1
"""
from __future__ import annotations

import sys
from typing import Iterable

from league_tables import settings
from league_tables.errors import FetchError
from league_tables.football_data_api import StandingsFetcher
from league_tables.leagues import LeagueCatalog, LeagueDescriptor, load_leagues

_HEADER = f"{'Pos':>3}  {'Team':<28}{'P':>3}{'W':>4}{'D':>4}{'L':>4}{'GF':>5}{'GA':>5}{'GD':>5}{'Pts':>5}  Zone"


def _resolve(token: str, catalog: LeagueCatalog) -> LeagueDescriptor:
    league = catalog.get(token)
    if league is not None:
        return league
    code = token.strip().upper()
    for candidate in catalog:
        if candidate.api_code == code:
            return candidate
    return LeagueDescriptor(id=0, slug=code.lower(), name=code, api_code=code)


def probe(tokens: Iterable[str], *, fetcher: StandingsFetcher, catalog: LeagueCatalog) -> int:
    failures = 0
    for token in tokens:
        league = _resolve(token, catalog)
        try:
            rows = fetcher.fetch(league.api_code)
        except FetchError as exc:
            failures += 1
            suffix = f", retry after {exc.retry_after}s" if exc.retry_after else ""
            print(f"{league.name} ({league.api_code}) failed ✗ [{exc.kind}] {exc.message}{suffix}")
            continue
        print(f"\n{league.name} ({league.api_code}) ✓ {len(rows)} rows")
        print(_HEADER)
        for row in rows:
            zone = league.zone_for(row["position"])
            print(
                f"{row['position']:>3}  {row['team'][:27]:<28}{row['played']:>3}{row['won']:>4}"
                f"{row['drawn']:>4}{row['lost']:>4}{row['gf']:>5}{row['ga']:>5}{row['gd']:>5}"
                f"{row['points']:>5}  {'' if zone == 'none' else zone}"
            )
    return failures


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not settings.FOOTBALL_DATA_API_KEY:
        print("FOOTBALL_DATA_API_KEY or FOOTBALL_DATA_API_KEY_FILE must be set.", file=sys.stderr)
        return 1
    if not argv:
        print("Usage: python -m scripts.standings_probe <slug|code> [<slug|code> ...]", file=sys.stderr)
        return 2

    catalog = load_leagues(settings.LEAGUES_FILE)
    failures = probe(argv, fetcher=StandingsFetcher(), catalog=catalog)
    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover - manual execution.
    sys.exit(main())
