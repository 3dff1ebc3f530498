from datetime import datetime, timezone
from typing import Optional

from flask import Flask

from . import settings
from .app_utils import make_error, make_ok
from .cache import StandingsCache
from .config import DEV_SERVER_HOST, DEV_SERVER_PORT, setup_logger
from .football_data_api import StandingsFetcher
from .leagues import load_leagues
from .routes.leagues_api import bp as leagues_api_bp
from .services.standings import StandingsService

logger = setup_logger(__name__)


def build_service(leagues_file: Optional[str] = None) -> StandingsService:
    """Wire the default service: packaged leagues, live fetcher, fresh cache."""
    leagues = load_leagues(leagues_file or settings.LEAGUES_FILE)
    if not settings.FOOTBALL_DATA_API_KEY:
        logger.warning("FOOTBALL_DATA_API_KEY is not set; upstream calls will be rejected")
    return StandingsService(leagues, StandingsFetcher(), StandingsCache())


def create_app(service: Optional[StandingsService] = None) -> Flask:
    app = Flask(__name__)
    app.extensions["league_tables"] = service or build_service()
    app.register_blueprint(leagues_api_bp)

    @app.route("/health", methods=["GET"])
    def health():
        return make_ok(
            {"ok": True, "ts": datetime.now(timezone.utc).isoformat()},
            "OK",
            status_code=200,
        )

    @app.errorhandler(404)
    def not_found(_exc):
        return make_error("not_found", message="Resource not found", status_code=404)

    logger.info("league_tables app created with %d leagues", len(app.extensions["league_tables"].leagues))
    return app


if __name__ == "__main__":
    create_app().run(debug=True, host=DEV_SERVER_HOST, port=DEV_SERVER_PORT)
