from typing import Optional

NOT_FOUND = "not_found"
RATE_LIMITED = "rate_limited"
TRANSIENT = "transient"
UPSTREAM = "upstream"

FAILURE_KINDS = (NOT_FOUND, RATE_LIMITED, TRANSIENT, UPSTREAM)


class APIError(Exception):
    """Unified error class for all external API clients."""

    def __init__(self, source: str, code: str, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.source = source
        self.code = code
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "code": self.code,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }


class FetchError(APIError):
    """A classified standings fetch failure.

    ``kind`` is one of :data:`FAILURE_KINDS`; only ``transient`` failures are
    retried by the fetcher. ``retry_after`` is set for rate limits.
    """

    def __init__(
        self,
        kind: str,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[str] = None,
        retry_after: Optional[int] = None,
        source: str = "FootballData",
    ):
        if kind not in FAILURE_KINDS:
            raise ValueError(f"Unknown failure kind: {kind}")
        super().__init__(source, code or kind.upper(), message, details)
        self.kind = kind
        self.retry_after = retry_after

    @property
    def retryable(self) -> bool:
        return self.kind == TRANSIENT

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["kind"] = self.kind
        if self.retry_after is not None:
            data["retry_after"] = self.retry_after
        return data
