"""Centralized configuration constants for the League Tables service."""

# Cache Duration
CACHE_DURATION_SECONDS = 60  # Standings freshness window (seconds)

# API Timeouts (seconds)
API_TIMEOUT_FOOTBALL_DATA = 15  # football-data.org timeout

# Retry Configuration
MAX_RETRY_COUNT = 3  # Retries beyond the first attempt (transient failures only)
RETRY_DELAY_BASE = 2  # Delay before retry n is RETRY_DELAY_BASE ** n seconds
RATE_LIMIT_RETRY_AFTER = 60  # Suggested client wait after a 429 (seconds)

# Qualification zones, in the order they are checked
ZONE_CHAMPIONS_LEAGUE = "championsLeague"
ZONE_CHAMPIONS_LEAGUE_QUALIFIER = "championsLeagueQualifier"
ZONE_EUROPA_LEAGUE = "europaLeague"
ZONE_CONFERENCE_LEAGUE = "conferenceLeague"
ZONE_PLAYOFF = "playoff"
ZONE_RELEGATION = "relegation"
ZONE_NONE = "none"

ZONE_PRIORITY = (
    ZONE_CHAMPIONS_LEAGUE,
    ZONE_CHAMPIONS_LEAGUE_QUALIFIER,
    ZONE_EUROPA_LEAGUE,
    ZONE_CONFERENCE_LEAGUE,
    ZONE_PLAYOFF,
    ZONE_RELEGATION,
)

# Development Server
DEV_SERVER_HOST = "0.0.0.0"
DEV_SERVER_PORT = 5000
