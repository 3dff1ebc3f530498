from typing import Any, Dict, Optional

from flask import jsonify

from .errors import APIError, NOT_FOUND, RATE_LIMITED
from .config import RATE_LIMIT_RETRY_AFTER
from .domain.results import Err

_STATUS_BY_KIND = {
    NOT_FOUND: 404,
    RATE_LIMITED: 429,
}


def make_ok(data: Optional[Any] = None, message: str = "success", status_code: int = 200):
    """Return a standardized success envelope."""
    payload = {
        "status": "ok",
        "message": message,
        "data": data,
    }
    return jsonify(payload), status_code


def make_error(error: Any, message: str = "An error occurred", status_code: int = 400):
    """Return a standardized error envelope."""
    if isinstance(error, APIError):
        error = error.to_dict()

    payload = {
        "status": "error",
        "message": message,
        "error": error,
    }
    return jsonify(payload), status_code


def standings_error_payload(result: Err) -> tuple[Dict[str, Any], int]:
    """Map a failed standings lookup onto its flat JSON body and status code."""
    status_code = _STATUS_BY_KIND.get(result.kind, 500)
    if result.kind == RATE_LIMITED:
        return (
            {
                "error": "API rate limit exceeded",
                "rateLimited": True,
                "retryAfter": result.retry_after or RATE_LIMIT_RETRY_AFTER,
            },
            status_code,
        )
    return {"error": result.message or "Unknown error"}, status_code
