"""Structured logging — JSON records carry extra request fields."""

import json
import logging

import pytest

from yelpcamp.infrastructure.observability import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "yelpcamp.test", logging.WARNING, __file__, 1, "Campground missing",
        None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "yelpcamp.test"
    assert log["message"] == "Campground missing"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(error_code="RESOURCE_NOT_FOUND", status_code=404, path="/campgrounds/x"),
    ))
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert log["status_code"] == 404
    assert log["path"] == "/campgrounds/x"
    assert "review_id" not in log


def test_setup_logging_replaces_own_handler(restore_root_logger):
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    own = [h for h in logging.root.handlers if h.get_name() == "yelpcamp"]
    assert len(own) == 1
    assert not isinstance(own[0].formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
