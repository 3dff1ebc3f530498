import logging

from league_tables.logging_utils import RateLimitedLogger


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_rate_limited_logger_suppresses_within_window(caplog):
    clock = FakeClock()
    limited = RateLimitedLogger(logging.getLogger("league_tables.test"), window_seconds=60, clock=clock)

    with caplog.at_level(logging.WARNING, logger="league_tables.test"):
        assert limited.warning(("stale", "pl"), "stale %s", "pl") is True
        assert limited.warning(("stale", "pl"), "stale %s", "pl") is False
        assert limited.warning(("stale", "bl1"), "stale %s", "bl1") is True
        clock.now += 60
        assert limited.warning(("stale", "pl"), "stale %s", "pl") is True

    messages = [record.getMessage() for record in caplog.records if record.levelno == logging.WARNING]
    assert messages == ["stale pl", "stale bl1", "stale pl"]


def test_reset_allows_immediate_reemit():
    clock = FakeClock()
    limited = RateLimitedLogger(logging.getLogger("league_tables.test"), clock=clock)
    limited.error(("k",), "first")
    limited.reset()
    assert limited.error(("k",), "again") is True
