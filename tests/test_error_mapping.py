import pytest

from league_tables.app_utils import standings_error_payload
from league_tables.domain.results import Err
from league_tables.errors import APIError, FetchError, NOT_FOUND, RATE_LIMITED, TRANSIENT, UPSTREAM


def test_apierror_to_dict():
    err = APIError("FootballData", "TIMEOUT", "football-data.org failed", "details")
    data = err.to_dict()
    assert data["source"] == "FootballData"
    assert data["code"] == "TIMEOUT"
    assert "details" in data


def test_fetch_error_defaults():
    err = FetchError(RATE_LIMITED, "API rate limit exceeded", retry_after=30)
    assert err.source == "FootballData"
    assert err.code == "RATE_LIMITED"
    assert not err.retryable
    assert err.to_dict()["retry_after"] == 30
    assert FetchError(TRANSIENT, "reset").retryable


def test_fetch_error_rejects_unknown_kind():
    with pytest.raises(ValueError):
        FetchError("weird", "nope")


def test_err_from_error_copies_fields():
    err = Err.from_error(FetchError(RATE_LIMITED, "API rate limit exceeded", retry_after=12))
    assert err == Err(RATE_LIMITED, "API rate limit exceeded", 12)


@pytest.mark.parametrize(
    "result, status_code",
    [
        (Err(NOT_FOUND, "League not found"), 404),
        (Err(RATE_LIMITED, "API rate limit exceeded"), 429),
        (Err(TRANSIENT, "timed out"), 500),
        (Err(UPSTREAM, "Failed to fetch data: 403"), 500),
    ],
)
def test_standings_error_status_codes(result, status_code):
    body, code = standings_error_payload(result)
    assert code == status_code
    assert body["error"]


def test_rate_limit_body_defaults_retry_after():
    body, _ = standings_error_payload(Err(RATE_LIMITED, "API rate limit exceeded"))
    assert body == {"error": "API rate limit exceeded", "rateLimited": True, "retryAfter": 60}
