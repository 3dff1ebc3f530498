import os
from dotenv import load_dotenv

# Load .env from repo root (dotenv auto-walks up from CWD)
load_dotenv()


def _read_secret_file(path: str | None) -> str | None:
    if not path:
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return None


# --- football-data.org settings ---
FOOTBALL_DATA_API_KEY = (
    os.getenv("FOOTBALL_DATA_API_KEY")
    or _read_secret_file(os.getenv("FOOTBALL_DATA_API_KEY_FILE"))
    or ""
)
FOOTBALL_DATA_BASE = os.getenv("FOOTBALL_DATA_BASE", "https://api.football-data.org/v4").rstrip("/")

# --- Reference data ---
_DEFAULT_LEAGUES_FILE = os.path.join(os.path.dirname(__file__), "data", "leagues.json")
LEAGUES_FILE = os.getenv("LEAGUES_FILE") or _DEFAULT_LEAGUES_FILE
