"""Configuration management for terminus_tracker."""

import os
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _get_int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _get_date_env(name: str, default: str) -> datetime:
    value = os.environ.get(name) or default
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        parsed = datetime.strptime(default, "%Y-%m-%d")
    return parsed.replace(tzinfo=timezone.utc)


class Config:
    """Application configuration."""

    # Base paths
    BASE_DIR = Path(__file__).parent.parent
    STATIC_DIR = BASE_DIR / "static"
    LOGS_DIR = BASE_DIR / "logs"

    # Snapshot written by the fetch job and served statically
    SNAPSHOT_PATH = Path(
        os.environ.get("TERMINUS_SNAPSHOT_PATH", str(STATIC_DIR / "activities.json"))
    )

    # Strava credentials
    STRAVA_CLIENT_ID = os.environ.get("STRAVA_CLIENT_ID")
    STRAVA_CLIENT_SECRET = os.environ.get("STRAVA_CLIENT_SECRET")
    STRAVA_REFRESH_TOKEN = os.environ.get("STRAVA_REFRESH_TOKEN")
    STRAVA_REDIRECT_URI = os.environ.get("STRAVA_REDIRECT_URI", "http://localhost:8080/oauth/callback")

    # Strava endpoints
    STRAVA_AUTHORIZE_URL = "https://www.strava.com/oauth/authorize"
    STRAVA_TOKEN_URL = "https://www.strava.com/oauth/token"
    STRAVA_API_BASE = "https://www.strava.com/api/v3"
    STRAVA_ACTIVITY_URL = "https://www.strava.com/activities"

    # Fetch window
    PER_PAGE = 200
    MAX_PAGES = 10
    START_DATE = _get_date_env("TERMINUS_START_DATE", "2025-03-22")

    # Filtering
    KEYWORD = os.environ.get("TERMINUS_KEYWORD", "terminus")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Web
    WEB_HOST = "127.0.0.1"
    WEB_PORT = _get_int_env("TERMINUS_WEB_PORT", 8080)
    SECRET_KEY = os.environ.get("TERMINUS_SECRET_KEY", "terminus-dev")
    ACTIVITY_CACHE_SECONDS = _get_int_env("TERMINUS_ACTIVITY_CACHE_SECONDS", 10 * 60)

    @classmethod
    def start_epoch(cls) -> int:
        """Lower bound of the fetch window as Unix seconds."""
        return int(cls.START_DATE.timestamp())

    @classmethod
    def ensure_directories(cls):
        """Ensure all required directories exist."""
        cls.STATIC_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    def __repr__(self):
        return f"Config(BASE_DIR={self.BASE_DIR}, SNAPSHOT={self.SNAPSHOT_PATH})"
