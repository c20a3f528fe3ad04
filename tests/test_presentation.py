"""Tests for formatting, the table view and page state."""

import pytest

from conftest import make_activity
from terminus_tracker.presentation.formatting import ActivityFormatter, format_date, format_duration
from terminus_tracker.presentation.page import (
    EMPTY_MESSAGE,
    ERROR_MESSAGE,
    build_page_state,
    load_page_state,
    render_cards,
    toggle_view,
)
from terminus_tracker.presentation.table import SortState, TableView


class TestFormatting:
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "0m 0s"),
            (59, "0m 59s"),
            (125, "2m 5s"),
            (3600, "1h 0m 0s"),
            (7200, "2h 0m 0s"),
            (4520, "1h 15m 20s"),
        ],
    )
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2025-04-01T10:00:00Z", "1st April 2025"),
            ("2025-04-02T10:00:00Z", "2nd April 2025"),
            ("2025-04-03T10:00:00Z", "3rd April 2025"),
            ("2025-04-11T10:00:00Z", "11th April 2025"),
            ("2025-04-22T10:00:00Z", "22nd April 2025"),
            (None, ""),
        ],
    )
    def test_format_date(self, value, expected):
        assert format_date(value) == expected

    def test_meta_for_complete_activity(self):
        activity = make_activity(1, distance=25400.5, moving_time=4520, total_elevation_gain=210.6)
        assert ActivityFormatter().meta(activity) == {
            "distance": "25.40 km",
            "time": "1h 15m 20s",
            "speed": "20.23 km/h",
            "elevation": "211 m",
        }

    def test_meta_missing_or_zero_fields_are_not_available(self):
        activity = make_activity(1, distance=0, total_elevation_gain=None)
        assert ActivityFormatter().meta(activity) == {
            "distance": "N/A",
            "time": "N/A",
            "speed": "N/A",
            "elevation": "N/A",
        }

    def test_formatters_keep_separate_caches(self):
        first, second = ActivityFormatter(), ActivityFormatter()
        first.duration(60)
        assert first._durations == {60: "1m 0s"}
        assert second._durations == {}


def _rows():
    return [
        make_activity(1, "Short fast", distance=5000, moving_time=600, total_elevation_gain=20),
        make_activity(2, "Long slow", distance=40000, moving_time=9000, total_elevation_gain=300),
        make_activity(3, "No data"),
        make_activity(4, "Medium", distance=20000, moving_time=3600, total_elevation_gain=150),
    ]


class TestTableView:
    def test_totals_example(self):
        view = TableView([
            make_activity(1, distance=1000, moving_time=3600),
            make_activity(2, distance=2000, moving_time=3600),
        ])

        totals = view.render().totals

        assert totals["distance"] == "3.00 km"
        assert totals["time"] == "2h 0m 0s"
        assert totals["speed"] == "1.50 km/h"
        assert totals["elevation"] == "N/A"

    def test_total_speed_uses_summed_distance_and_time(self):
        view = TableView([
            make_activity(1, distance=10000, moving_time=1800),
            make_activity(2, distance=10000, moving_time=5400),
        ])
        # 20 km over 2 h, not the mean of 20 and 6.67 km/h
        assert view.render().totals["speed"] == "10.00 km/h"

    def test_empty_table_totals(self):
        totals = TableView([]).render().totals
        assert totals == {"distance": "N/A", "time": "N/A", "speed": "N/A", "elevation": "N/A"}

    def test_default_keeps_fetched_order(self):
        rows = TableView(_rows()).render().rows
        assert [r["id"] for r in rows] == [1, 2, 3, 4]
        assert [r["index"] for r in rows] == [1, 2, 3, 4]

    def test_first_click_sorts_descending(self):
        view = TableView(_rows())
        rows = view.handle_sort_click("distance").rows
        assert [r["id"] for r in rows] == [2, 4, 1, 3]
        assert view.sort == SortState("distance", False)

    def test_second_click_flips_direction(self):
        view = TableView(_rows())
        view.handle_sort_click("elevation")
        rows = view.handle_sort_click("elevation").rows
        assert [r["id"] for r in rows] == [3, 1, 4, 2]
        assert view.sort.ascending is True

    def test_switching_column_resets_to_descending(self):
        view = TableView(_rows())
        view.handle_sort_click("time")
        view.handle_sort_click("time")
        view.handle_sort_click("distance")
        assert view.sort == SortState("distance", False)

    def test_speed_sorts_on_raw_ratio(self):
        view = TableView(_rows())
        rows = view.handle_sort_click("speed").rows
        # 8.33, 5.56, 4.44 m/s then missing data as zero
        assert [r["id"] for r in rows] == [1, 4, 2, 3]

    def test_unknown_column_rejected(self):
        with pytest.raises(ValueError):
            TableView(_rows()).handle_sort_click("name")

    def test_render_is_idempotent(self):
        view = TableView(_rows(), sort=SortState("time", True))
        assert view.render() == view.render()

    def test_totals_unaffected_by_sort(self):
        view = TableView(_rows())
        before = view.render().totals
        assert view.handle_sort_click("speed").totals == before

    def test_headers_show_indicator_and_next_state(self):
        view = TableView(_rows(), sort=SortState("distance", False))
        headers = {h["column"]: h for h in view.render().headers}
        assert headers["distance"]["indicator"] == "▼"
        assert headers["distance"]["next_order"] == "asc"
        assert headers["time"]["indicator"] == ""
        assert headers["time"]["next_order"] == "desc"

    def test_sort_state_from_query(self):
        assert SortState.from_query("speed", "asc") == SortState("speed", True)
        assert SortState.from_query("speed", None) == SortState("speed", False)
        assert SortState.from_query("bogus", "asc") == SortState()


class TestPageState:
    def test_unauthorized_shows_login_only(self):
        state = build_page_state(401, {"error": "Not authenticated"})
        assert state.show_login
        assert not state.show_toggle
        assert state.view is None
        assert state.message == ""

    def test_server_error_treated_as_logged_out(self):
        state = build_page_state(500, None)
        assert state.show_login
        assert state.view is None

    def test_empty_result_shows_login_and_message(self):
        state = build_page_state(200, [])
        assert state.show_login
        assert state.message == EMPTY_MESSAGE
        assert state.view is None

    def test_data_defaults_to_card_view(self, sample_activities):
        state = build_page_state(200, sample_activities)
        assert state.view == "card"
        assert state.show_toggle
        assert state.toggle_label == "See Tabular View"
        assert not state.show_login

    def test_table_preference(self, sample_activities):
        state = build_page_state(200, sample_activities, "table")
        assert state.view == "table"
        assert state.toggle_label == "See Card View"

    def test_unknown_preference_falls_back_to_cards(self, sample_activities):
        assert build_page_state(200, sample_activities, "grid").view == "card"

    def test_loader_failure_becomes_message(self):
        def loader():
            raise ConnectionError("offline")

        state = load_page_state(loader)
        assert state.message == ERROR_MESSAGE
        assert state.view is None

    @pytest.mark.parametrize("current, expected", [(None, "table"), ("card", "table"), ("table", "card")])
    def test_toggle_view(self, current, expected):
        assert toggle_view(current) == expected

    def test_render_cards(self):
        cards = render_cards([make_activity(9, "Terminus", "2025-04-03T08:00:00Z", distance=1500)])
        assert cards == [{
            "id": 9,
            "name": "Terminus",
            "date": "3rd April 2025",
            "description": "",
            "distance": "1.50 km",
            "time": "N/A",
            "speed": "N/A",
            "elevation": "N/A",
        }]
