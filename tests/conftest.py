"""Shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path, monkeypatch):
    """Keep logs and snapshots inside the test's temp directory."""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    monkeypatch.setattr("terminus_tracker.config.Config.STATIC_DIR", static_dir)
    monkeypatch.setattr("terminus_tracker.config.Config.LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr("terminus_tracker.config.Config.SNAPSHOT_PATH", static_dir / "activities.json")
    return tmp_path


def make_activity(id, name="", start_date="2025-04-01T00:00:00Z", **fields):
    activity = {"id": id, "name": name, "start_date": start_date}
    activity.update(fields)
    return activity


@pytest.fixture
def sample_activities():
    """Mixed activities; ids 3, 2, 4 mention terminus."""
    return [
        make_activity(1, "Morning Ride", "2025-04-01T10:00:00Z"),
        make_activity(2, "Terminus Sprint", "2025-04-02T09:00:00Z", distance=12000.0, moving_time=1800),
        make_activity(
            3,
            "Evening ride",
            "2025-04-03T08:00:00Z",
            description="Reached the TERMINUS finally",
            distance=25400.5,
            moving_time=4520,
            total_elevation_gain=210.6,
        ),
        make_activity(4, "Another terminus cruise", "2025-04-01T12:00:00Z", distance=8000.0, moving_time=3600),
        make_activity(5, "Random", "2025-03-31T12:00:00Z", description="nothing special"),
    ]
