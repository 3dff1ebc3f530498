from typing import Dict, List, TypedDict


class StandingsRow(TypedDict):
    position: int
    team: str
    played: int
    won: int
    drawn: int
    lost: int
    gf: int
    ga: int
    gd: int
    points: int


class LeagueSummary(TypedDict):
    id: int
    slug: str
    name: str
    country: str
    apiCode: str
    logo: str
    positions: Dict[str, List[int]]
