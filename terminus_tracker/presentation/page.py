"""Decides what the activity page shows for a given load result."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from terminus_tracker.presentation.formatting import ActivityFormatter

logger = logging.getLogger(__name__)

VIEW_CARD = "card"
VIEW_TABLE = "table"
VIEW_PREFERENCE_COOKIE = "viewMode"

TOGGLE_VIEW_LABELS = {
    VIEW_CARD: "See Card View",
    VIEW_TABLE: "See Tabular View",
}

EMPTY_MESSAGE = "No activities found for the Tube Cycling Challenge."
ERROR_MESSAGE = "Error loading activities. Please try again later."


@dataclass
class PageState:
    show_login: bool = False
    show_toggle: bool = False
    view: Optional[str] = None
    toggle_label: str = ""
    message: str = ""
    activities: list[dict[str, Any]] = field(default_factory=list)

    @property
    def has_content(self) -> bool:
        return self.view is not None


def normalize_view(preference: Optional[str]) -> str:
    return VIEW_TABLE if preference == VIEW_TABLE else VIEW_CARD


def toggle_view(preference: Optional[str]) -> str:
    """The preference to store after the toggle button is pressed."""
    return VIEW_CARD if normalize_view(preference) == VIEW_TABLE else VIEW_TABLE


def toggle_label(view: str) -> str:
    """Label offering the view that is not showing."""
    return TOGGLE_VIEW_LABELS[VIEW_CARD] if view == VIEW_TABLE else TOGGLE_VIEW_LABELS[VIEW_TABLE]


def build_page_state(status_code: int, payload: Any, preference: Optional[str] = None) -> PageState:
    """Page state for an /activities response.

    A 401 or any other non-success status means "not logged in" and is not
    an error.
    """
    if not 200 <= status_code < 300:
        return PageState(show_login=True)

    activities = payload or []
    if not activities:
        return PageState(show_login=True, message=EMPTY_MESSAGE)

    view = normalize_view(preference)
    return PageState(
        show_toggle=True,
        view=view,
        toggle_label=toggle_label(view),
        activities=list(activities),
    )


def load_page_state(loader: Callable[[], tuple[int, Any]], preference: Optional[str] = None) -> PageState:
    """Run loader and build the page state, turning failures into a message."""
    try:
        status_code, payload = loader()
    except Exception as e:
        logger.error(f"Error fetching activities: {e}")
        return PageState(message=ERROR_MESSAGE)
    return build_page_state(status_code, payload, preference)


def render_cards(activities: list[dict[str, Any]], formatter: Optional[ActivityFormatter] = None) -> list[dict[str, Any]]:
    """Card view model for each activity, in the order given."""
    formatter = formatter or ActivityFormatter()
    cards = []
    for activity in activities:
        cards.append({
            "id": activity.get("id"),
            "name": activity.get("name") or "",
            "date": formatter.date(activity.get("start_date")),
            "description": activity.get("description") or "",
            **formatter.meta(activity),
        })
    return cards
