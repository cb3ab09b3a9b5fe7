"""Structured logging — JSON formatter surfaces recipe extras."""

import json
import logging

from recipes_data_provider.infrastructure.observability import (
    JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "recipes", logging.INFO, __file__, 1, "Recipe created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "recipes"
    assert log["message"] == "Recipe created"


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(recipe_uuid="abc", store_error_kind="unique_violation"),
    ))
    assert log["recipe_uuid"] == "abc"
    assert log["store_error_kind"] == "unique_violation"
    assert "error_code" not in log


def test_setup_logging_is_idempotent():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("DEBUG", "json")
    assert len(logging.root.handlers) == before + 1
    assert logging.root.level == logging.DEBUG
    for handler in list(logging.root.handlers):
        if handler.get_name() == "recipes_data_provider":
            logging.root.removeHandler(handler)
