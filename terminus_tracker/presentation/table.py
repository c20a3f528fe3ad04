"""Sortable table view with per-row metrics and totals."""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from terminus_tracker.config import Config
from terminus_tracker.presentation.formatting import NOT_AVAILABLE, ActivityFormatter, round_half_up

SORT_COLUMNS = ("distance", "time", "speed", "elevation")

COLUMN_LABELS = {
    "distance": "Distance",
    "time": "Time",
    "speed": "Speed",
    "elevation": "Elevation",
}


def _number(value: Any) -> float:
    return value if isinstance(value, (int, float)) and value else 0


def _raw_speed(activity: dict[str, Any]) -> float:
    distance = _number(activity.get("distance"))
    moving_time = _number(activity.get("moving_time"))
    return distance / moving_time if distance and moving_time else 0


SORT_KEYS: dict[str, Callable[[dict[str, Any]], float]] = {
    "distance": lambda a: _number(a.get("distance")),
    "time": lambda a: _number(a.get("moving_time")),
    "speed": _raw_speed,
    "elevation": lambda a: _number(a.get("total_elevation_gain")),
}


@dataclass
class SortState:
    """Selected column and direction; no column keeps the fetched order."""

    column: Optional[str] = None
    ascending: bool = True

    def clicked(self, column: str) -> "SortState":
        """State after a click on column: new columns start descending."""
        if column not in SORT_COLUMNS:
            raise ValueError(f"Unknown sort column: {column}")
        if self.column == column:
            return SortState(column, not self.ascending)
        return SortState(column, False)

    @property
    def order(self) -> str:
        return "asc" if self.ascending else "desc"

    @classmethod
    def from_query(cls, column: Optional[str], order: Optional[str]) -> "SortState":
        if column not in SORT_COLUMNS:
            return cls()
        return cls(column, order == "asc")


@dataclass
class TableRender:
    headers: list[dict[str, Any]]
    rows: list[dict[str, Any]]
    totals: dict[str, str]
    sort: SortState = field(default_factory=SortState)


class TableView:
    """Table of activities that owns its sort state and formatter."""

    def __init__(
        self,
        activities: list[dict[str, Any]],
        sort: Optional[SortState] = None,
        formatter: Optional[ActivityFormatter] = None,
    ):
        self.activities = list(activities)
        self.sort = sort or SortState()
        self.formatter = formatter or ActivityFormatter()

    def sorted_activities(self) -> list[dict[str, Any]]:
        if self.sort.column is None:
            return list(self.activities)
        return sorted(
            self.activities,
            key=SORT_KEYS[self.sort.column],
            reverse=not self.sort.ascending,
        )

    def totals(self) -> dict[str, Any]:
        """Summed distance, time and elevation plus the overall speed."""
        distance = sum(_number(a.get("distance")) for a in self.activities)
        moving_time = sum(_number(a.get("moving_time")) for a in self.activities)
        elevation = sum(_number(a.get("total_elevation_gain")) for a in self.activities)
        return {
            "distance": distance,
            "moving_time": moving_time,
            "elevation": elevation,
            "distance_display": self.formatter.distance(distance),
            "time_display": self.formatter.duration(moving_time) if moving_time else NOT_AVAILABLE,
            "speed_display": self.formatter.speed(distance, moving_time),
            "elevation_display": f"{round_half_up(elevation)} m" if elevation else NOT_AVAILABLE,
        }

    def sort_indicator(self, column: str) -> str:
        if self.sort.column != column:
            return ""
        return "▲" if self.sort.ascending else "▼"

    def handle_sort_click(self, column: str) -> TableRender:
        self.sort = self.sort.clicked(column)
        return self.render()

    def render(self) -> TableRender:
        """Rebuild the whole table from the current state."""
        headers = []
        for column in SORT_COLUMNS:
            next_sort = self.sort.clicked(column)
            headers.append({
                "column": column,
                "label": COLUMN_LABELS[column],
                "indicator": self.sort_indicator(column),
                "next_column": next_sort.column,
                "next_order": next_sort.order,
            })

        rows = []
        for index, activity in enumerate(self.sorted_activities(), start=1):
            rows.append({
                "index": index,
                "id": activity.get("id"),
                "name": activity.get("name") or "",
                "url": f"{Config.STRAVA_ACTIVITY_URL}/{activity.get('id')}",
                **self.formatter.meta(activity),
            })

        totals = self.totals()
        return TableRender(
            headers=headers,
            rows=rows,
            totals={
                "distance": totals["distance_display"],
                "time": totals["time_display"],
                "speed": totals["speed_display"],
                "elevation": totals["elevation_display"],
            },
            sort=SortState(self.sort.column, self.sort.ascending),
        )
