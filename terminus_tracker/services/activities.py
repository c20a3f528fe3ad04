"""Activity aggregation and keyword filtering."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Optional

from terminus_tracker.clients.base import BaseClient
from terminus_tracker.config import Config

logger = logging.getLogger(__name__)

Activity = dict[str, Any]


@dataclass
class PageFetchResult:
    """Outcome of a parallel page fetch: the activities or the first error."""

    activities: list[Activity] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[Activity]:
        if self.error is not None:
            raise self.error
        return self.activities


def gather_pages(client: BaseClient, token: str, max_pages: int = Config.MAX_PAGES) -> PageFetchResult:
    """Fetch pages 1..max_pages concurrently.

    Every page is requested up front, even when an earlier page comes back
    short. The first failed page decides the result; pages still in flight
    are left running and their outcome is ignored.
    """
    executor = ThreadPoolExecutor(max_workers=max_pages)
    try:
        futures = {
            executor.submit(client.get_activities_page, token, page): page
            for page in range(1, max_pages + 1)
        }

        pages: dict[int, list[Activity]] = {}
        for future in as_completed(futures):
            page = futures[future]
            try:
                pages[page] = future.result()
            except Exception as e:
                logger.error(f"Page {page} failed, aborting aggregation: {e}")
                return PageFetchResult(error=e)
    finally:
        executor.shutdown(wait=False)

    activities: list[Activity] = []
    for page in sorted(pages):
        if pages[page]:
            activities.extend(pages[page])
    return PageFetchResult(activities=activities)


def fetch_all_activities(client: BaseClient, token: str, max_pages: int = Config.MAX_PAGES) -> list[Activity]:
    """Fetch and concatenate all pages, raising the first page error."""
    activities = gather_pages(client, token, max_pages).unwrap()
    logger.info(f"Fetched {len(activities)} total activities")
    return activities


def _text(activity: Activity, key: str) -> str:
    value = activity.get(key)
    return value if isinstance(value, str) else ""


def matches_keyword(activity: Activity, keyword: str = Config.KEYWORD) -> bool:
    needle = keyword.lower()
    return needle in _text(activity, "name").lower() or needle in _text(activity, "description").lower()


def filter_and_sort_activities(activities: list[Activity], keyword: str = Config.KEYWORD) -> list[Activity]:
    """Keep activities mentioning the keyword, most recent first."""
    filtered = [a for a in activities if matches_keyword(a, keyword)]
    # ISO-8601 start dates are fixed width, so string order is time order
    filtered.sort(key=lambda a: _text(a, "start_date"), reverse=True)
    return filtered
