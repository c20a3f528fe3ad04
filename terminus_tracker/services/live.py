"""Per-user live activity lookups for the web app."""

import logging
import threading
import time
from typing import Any, Optional

from terminus_tracker.clients.strava import StravaClient
from terminus_tracker.config import Config
from terminus_tracker.services.activities import fetch_all_activities, filter_and_sort_activities

logger = logging.getLogger(__name__)


class LiveActivityService:
    """Holds OAuth tokens in memory and caches each user's filtered list."""

    def __init__(self, client: Optional[StravaClient] = None, cache_seconds: int = Config.ACTIVITY_CACHE_SECONDS):
        self.client = client or StravaClient()
        self.cache_seconds = cache_seconds
        self._tokens: dict[str, str] = {}
        self._cache: dict[str, tuple[list[dict[str, Any]], float]] = {}
        self._lock = threading.Lock()

    def login(self, code: str) -> str:
        """Exchange an authorization code and remember the token. Returns the user id."""
        payload = self.client.exchange_code(Config.STRAVA_CLIENT_ID, Config.STRAVA_CLIENT_SECRET, code)
        user_id = str((payload.get("athlete") or {}).get("id", 0))
        with self._lock:
            self._tokens[user_id] = payload["access_token"]
        logger.info(f"Stored token for athlete {user_id}")
        return user_id

    def remember_token(self, user_id: str, token: str) -> None:
        with self._lock:
            self._tokens[user_id] = token

    def is_authenticated(self, user_id: Optional[str]) -> bool:
        if not user_id:
            return False
        with self._lock:
            return user_id in self._tokens

    def cache_activities(self, user_id: str, activities: list[dict[str, Any]], timestamp: Optional[float] = None) -> None:
        with self._lock:
            self._cache[user_id] = (activities, timestamp if timestamp is not None else time.time())

    def get_activities(self, user_id: str) -> list[dict[str, Any]]:
        """Return the user's filtered activities, from cache when still fresh."""
        with self._lock:
            token = self._tokens[user_id]
            cached = self._cache.get(user_id)

        if cached and time.time() - cached[1] < self.cache_seconds:
            logger.debug(f"Serving cached activities for {user_id}")
            return cached[0]

        activities = filter_and_sort_activities(fetch_all_activities(self.client, token))
        self.cache_activities(user_id, activities)
        return activities
