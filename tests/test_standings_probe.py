from scripts import standings_probe
from league_tables.errors import RATE_LIMITED, FetchError
from league_tables.leagues import LeagueCatalog, LeagueDescriptor


CATALOG = LeagueCatalog(
    [
        LeagueDescriptor(
            id=1,
            slug="premier-league",
            name="Premier League",
            api_code="PL",
            positions={"championsLeague": (1,)},
        )
    ]
)


class FakeFetcher:
    def __init__(self, outcomes):
        self.outcomes = dict(outcomes)
        self.calls = []

    def fetch(self, competition_code):
        self.calls.append(competition_code)
        outcome = self.outcomes[competition_code]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


ROW = {"position": 1, "team": "Arsenal", "played": 3, "won": 3, "drawn": 0, "lost": 0, "gf": 7, "ga": 1, "gd": 6, "points": 9}


def test_probe_resolves_slugs_and_codes(capsys):
    fetcher = FakeFetcher({"PL": [ROW], "BL1": [ROW]})

    failures = standings_probe.probe(["premier-league", "bl1"], fetcher=fetcher, catalog=CATALOG)

    assert failures == 0
    assert fetcher.calls == ["PL", "BL1"]
    out = capsys.readouterr().out
    assert "Premier League (PL) ✓ 1 rows" in out
    assert "championsLeague" in out
    assert "Arsenal" in out


def test_probe_reports_failures(capsys):
    fetcher = FakeFetcher({"PL": FetchError(RATE_LIMITED, "API rate limit exceeded", retry_after=60)})

    failures = standings_probe.probe(["PL"], fetcher=fetcher, catalog=CATALOG)

    assert failures == 1
    assert "[rate_limited]" in capsys.readouterr().out


def test_main_requires_api_key(monkeypatch, capsys):
    monkeypatch.setattr(standings_probe.settings, "FOOTBALL_DATA_API_KEY", "")

    assert standings_probe.main(["PL"]) == 1
    assert "FOOTBALL_DATA_API_KEY" in capsys.readouterr().err


def test_main_requires_arguments(monkeypatch, capsys):
    monkeypatch.setattr(standings_probe.settings, "FOOTBALL_DATA_API_KEY", "token")

    assert standings_probe.main([]) == 2
    assert "Usage" in capsys.readouterr().err
