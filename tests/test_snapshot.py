"""Tests for the JSON snapshot."""

import json

import pytest

from terminus_tracker.errors import IoError
from terminus_tracker.services.snapshot import write_snapshot


def test_write_snapshot_pretty_prints_and_keeps_unknown_fields(tmp_path):
    path = tmp_path / "activities.json"
    activities = [{"id": 1, "name": "Terminus Café", "start_date": "2025-04-01T00:00:00Z", "kudos_count": 3}]

    write_snapshot(activities, path)

    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == activities
    assert '\n  {\n    "id": 1,' in text
    assert "Café" in text


def test_write_snapshot_replaces_previous_content(tmp_path):
    path = tmp_path / "activities.json"
    write_snapshot([{"id": 1}, {"id": 2}], path)
    write_snapshot([], path)

    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_unwritable_target_raises_io_error(tmp_path):
    path = tmp_path / "missing-dir" / "activities.json"

    with pytest.raises(IoError):
        write_snapshot([{"id": 1}], path)


def test_get_logger_writes_dated_file(isolated_paths):
    from terminus_tracker.logger import get_logger

    logger = get_logger("terminus_tracker.tests.snapshot")
    logger.info("snapshot logging check")
    for handler in logger.handlers:
        handler.flush()

    log_files = list((isolated_paths / "logs").glob("terminus_*.log"))
    assert len(log_files) == 1
    assert "snapshot logging check" in log_files[0].read_text(encoding="utf-8")
    assert get_logger("terminus_tracker.tests.snapshot") is logger
