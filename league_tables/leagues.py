"""League reference data and qualification zone lookup."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import setup_logger
from .constants import ZONE_NONE, ZONE_PRIORITY
from .domain.contracts import LeagueSummary

logger = setup_logger(__name__)

_REQUIRED_FIELDS = ("id", "slug", "name", "apiCode")


def classify_position(position: int, positions: Optional[Mapping[str, Iterable[int]]]) -> str:
    """Return the qualification zone tag for a table position, or ``"none"``.

    Zones are checked in ``ZONE_PRIORITY`` order (continental tiers, then
    playoff, then relegation); zones missing from ``positions`` are skipped.
    """
    if not positions:
        return ZONE_NONE
    for zone in ZONE_PRIORITY:
        members = positions.get(zone)
        if members and position in members:
            return zone
    return ZONE_NONE


@dataclass(frozen=True)
class LeagueDescriptor:
    id: int
    slug: str
    name: str
    api_code: str
    country: str = ""
    logo: str = ""
    positions: Mapping[str, Tuple[int, ...]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping) -> "LeagueDescriptor":
        missing = [key for key in _REQUIRED_FIELDS if not raw.get(key)]
        if missing:
            raise ValueError(f"League entry missing fields: {', '.join(missing)}")
        positions = {
            str(zone): tuple(int(p) for p in members)
            for zone, members in (raw.get("positions") or {}).items()
        }
        return cls(
            id=int(raw["id"]),
            slug=str(raw["slug"]).strip().lower(),
            name=str(raw["name"]),
            api_code=str(raw["apiCode"]).strip().upper(),
            country=str(raw.get("country") or ""),
            logo=str(raw.get("logo") or ""),
            positions=positions,
        )

    def zone_for(self, position: int) -> str:
        return classify_position(position, self.positions)

    def to_dict(self) -> LeagueSummary:
        return {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "country": self.country,
            "apiCode": self.api_code,
            "logo": self.logo,
            "positions": {zone: list(members) for zone, members in self.positions.items()},
        }


class LeagueCatalog:
    """Read-only lookup over the configured leagues, keyed by slug."""

    def __init__(self, leagues: Sequence[LeagueDescriptor]):
        self._leagues: Tuple[LeagueDescriptor, ...] = tuple(leagues)
        self._by_slug: Dict[str, LeagueDescriptor] = {}
        for league in self._leagues:
            if league.slug in self._by_slug:
                raise ValueError(f"Duplicate league slug: {league.slug}")
            self._by_slug[league.slug] = league

    def __len__(self) -> int:
        return len(self._leagues)

    def __iter__(self):
        return iter(self._leagues)

    def get(self, slug: Optional[str]) -> Optional[LeagueDescriptor]:
        if not slug:
            return None
        return self._by_slug.get(slug.strip().lower())

    def all(self) -> List[LeagueDescriptor]:
        return list(self._leagues)


def load_leagues(path: str) -> LeagueCatalog:
    """Load league descriptors from a JSON list at ``path``."""
    with open(path, "r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, list):
        raise ValueError(f"League file must contain a list: {path}")
    catalog = LeagueCatalog([LeagueDescriptor.from_dict(entry) for entry in raw])
    logger.info("Loaded %d leagues from %s", len(catalog), path)
    return catalog
