"""
Tests for the execution monitor and logging setup.
"""
import logging

import pytest

from postsentiment.utils.log import configure_logging
from postsentiment.utils.monitor import init_monitor, update_status


def test_init_monitor_on_empty_shared():
    shared = {}
    monitor = init_monitor(shared)
    assert shared["monitor"] is monitor
    assert monitor["start_time"].endswith("Z")
    assert monitor["execution_log"] == []
    assert monitor["error_log"] == []
    assert monitor["durations"] == {}


def test_update_status_records_entries():
    shared = {}
    update_status(shared, node_name="LoadPostsNode", status="running")
    entry = update_status(shared, node_name="LoadPostsNode", status="failed", error="boom")

    monitor = shared["monitor"]
    assert monitor["current_node"] == "LoadPostsNode"
    assert [e["status"] for e in monitor["execution_log"]] == ["running", "failed"]
    assert monitor["error_log"] == [entry]
    assert entry["error"] == "boom"
    assert entry["elapsed"] >= 0


def test_completed_node_gets_duration():
    shared = {}
    update_status(shared, node_name="SaveResultsNode", status="running")
    update_status(shared, node_name="SaveResultsNode", status="completed")
    assert "SaveResultsNode" in shared["monitor"]["durations"]
    assert shared["monitor"]["node_started"] == {}


def test_completed_without_running_has_no_elapsed():
    entry = update_status({}, node_name="TerminalNode", status="completed")
    assert "elapsed" not in entry


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")
