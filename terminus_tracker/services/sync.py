"""Fetch job: token -> pages -> keyword filter -> snapshot."""

import logging
from pathlib import Path
from typing import Optional

from terminus_tracker.clients.strava import StravaClient
from terminus_tracker.config import Config
from terminus_tracker.services.activities import fetch_all_activities, filter_and_sort_activities
from terminus_tracker.services.snapshot import write_snapshot

logger = logging.getLogger(__name__)


class SyncService:
    """Runs one fetch of the keyword-filtered activity snapshot."""

    def __init__(self, client: Optional[StravaClient] = None):
        self.client = client or StravaClient()

    def run(self, output_path: Optional[Path] = None, keyword: Optional[str] = None) -> dict:
        """Fetch, filter and save activities.

        Any TrackerError propagates; nothing is written unless every page
        was fetched.
        """
        output_path = Path(output_path or Config.SNAPSHOT_PATH)
        keyword = keyword or Config.KEYWORD

        token = self.client.refresh_access_token(
            Config.STRAVA_CLIENT_ID,
            Config.STRAVA_CLIENT_SECRET,
            Config.STRAVA_REFRESH_TOKEN,
        )

        logger.info("Fetching activities from Strava API...")
        activities = fetch_all_activities(self.client, token)

        filtered = filter_and_sort_activities(activities, keyword)
        logger.info(f'Filtered to {len(filtered)} activities with "{keyword}" keyword')

        write_snapshot(filtered, output_path)

        return {
            'total': len(activities),
            'matched': len(filtered),
            'path': str(output_path),
        }
