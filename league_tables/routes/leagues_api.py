from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from ..app_utils import standings_error_payload
from ..services.standings import StandingsService

bp = Blueprint("leagues_api", __name__, url_prefix="/api/leagues")


def _get_service() -> StandingsService:
    return current_app.extensions["league_tables"]


@bp.get("")
@bp.get("/")
def list_leagues():
    """Return the configured leagues for the landing page."""
    srv = _get_service()
    return jsonify({"leagues": [league.to_dict() for league in srv.list_leagues()]})


@bp.get("/<slug>")
def league_standings(slug: str):
    srv = _get_service()
    result = srv.get_standings(slug)
    if not result.ok:
        body, status_code = standings_error_payload(result)
        return jsonify(body), status_code

    league = srv.get_league(slug)
    payload = result.to_payload()
    payload["rows"] = [dict(row, zone=league.zone_for(row["position"])) for row in payload["rows"]]
    return jsonify(payload)
