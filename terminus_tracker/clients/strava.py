"""Strava API client implementation."""

import logging
import time
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from terminus_tracker.clients.base import BaseClient
from terminus_tracker.config import Config
from terminus_tracker.errors import ConfigurationError, UpstreamApiError, UpstreamAuthError

logger = logging.getLogger(__name__)


class StravaClient(BaseClient):
    """Client for the Strava v3 API."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.base_url = Config.STRAVA_API_BASE
        self.token_url = Config.STRAVA_TOKEN_URL
        self.session = session or requests.Session()

    def refresh_access_token(self, client_id: str, client_secret: str, refresh_token: str) -> str:
        """Exchange a refresh token for a short-lived access token."""
        if not client_id or not client_secret or not refresh_token:
            raise ConfigurationError("Missing Strava OAuth environment variables")

        response = self.session.post(self.token_url, json={
            "client_id": client_id,
            "client_secret": client_secret,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        })
        if not response.ok:
            logger.error(f"Token refresh failed: {response.status_code} {response.reason}")
            raise UpstreamAuthError(response.status_code, response.reason)

        return response.json()["access_token"]

    def exchange_code(self, client_id: str, client_secret: str, code: str) -> Dict[str, Any]:
        """Exchange an OAuth authorization code for a token payload."""
        if not client_id or not client_secret:
            raise ConfigurationError("Missing Strava OAuth environment variables")

        response = self.session.post(self.token_url, data={
            "client_id": client_id,
            "client_secret": client_secret,
            "code": code,
            "grant_type": "authorization_code",
        })
        if not response.ok:
            logger.error(f"Code exchange failed: {response.status_code} {response.reason}")
            raise UpstreamAuthError(response.status_code, response.reason)

        return response.json()

    def get_activities_page(self, token: str, page: int) -> List[Dict[str, Any]]:
        """Get one page of activities inside the configured date window."""
        params = {
            "per_page": Config.PER_PAGE,
            "page": page,
            "after": Config.start_epoch(),
            "before": int(time.time()),
        }
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept-Encoding": "gzip",
        }

        response = self.session.get(f"{self.base_url}/athlete/activities", params=params, headers=headers)
        if not response.ok:
            logger.error(f"Failed to get activities page {page}: {response.status_code} {response.reason}")
            raise UpstreamApiError(response.status_code, response.reason)

        activities = response.json()
        logger.debug(f"Page {page} returned {len(activities)} activities")
        return activities


def authorize_url(client_id: Optional[str], redirect_uri: Optional[str]) -> str:
    """Build the Strava authorize URL users are redirected to for login."""
    params = {
        "client_id": client_id or "",
        "redirect_uri": redirect_uri or "",
        "response_type": "code",
        "scope": "activity:read",
    }
    return f"{Config.STRAVA_AUTHORIZE_URL}?{urlencode(params)}"
