"""Structured logging: JSON lines carry known extras, skip empty ones."""

import json
import logging

from tasks_api.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "tasks_api.services.task_service", logging.INFO, __file__, 1,
        "Task %s created", ("abc",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "tasks_api.services.task_service"
    assert log["message"] == "Task abc created"
    assert "timestamp" in log


def test_json_formatter_includes_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(task_id="abc", collection="tasks", backend="firestore"),
    ))
    assert log["task_id"] == "abc"
    assert log["collection"] == "tasks"
    assert log["backend"] == "firestore"


def test_json_formatter_skips_none_and_unknown_extras():
    log = json.loads(JSONFormatter().format(
        _record(task_id=None, secret="hidden"),
    ))
    assert "task_id" not in log
    assert "secret" not in log


def test_json_formatter_keeps_non_ascii_category():
    record = _record()
    record.msg = "Default category %s"
    record.args = ("Общее",)
    assert "Общее" in JSONFormatter().format(record)
