"""Tagged result of a standings lookup: ``Ok`` with rows or ``Err`` with a kind."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Union

from ..errors import FetchError
from .contracts import StandingsRow


def _iso(ts: Optional[float]) -> Optional[str]:
    if ts is None:
        return None
    return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class Ok:
    rows: Sequence[StandingsRow]
    cached: bool = False
    cached_at: Optional[float] = None
    stale: bool = False
    warning: Optional[str] = None

    ok = True

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"rows": list(self.rows), "cached": self.cached}
        if self.cached_at is not None:
            payload["cachedAt"] = _iso(self.cached_at)
        if self.stale:
            payload["stale"] = True
        if self.warning:
            payload["error"] = self.warning
        return payload


@dataclass(frozen=True)
class Err:
    kind: str
    message: str
    retry_after: Optional[int] = None

    ok = False

    @classmethod
    def from_error(cls, exc: FetchError) -> "Err":
        return cls(kind=exc.kind, message=exc.message, retry_after=exc.retry_after)


StandingsResult = Union[Ok, Err]

__all__: List[str] = ["Ok", "Err", "StandingsResult"]
