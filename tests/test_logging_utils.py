from __future__ import annotations

import json
import logging

from src.employee_records.employee_records.logging_utils import JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("employee_records.test", logging.INFO, __file__, 1, "leave %s", ("approved",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_message_and_extra_fields():
    payload = json.loads(JsonFormatter().format(_record(application_id="7", month=4)))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "employee_records.test"
    assert payload["message"] == "leave approved"
    assert payload["application_id"] == "7"
    assert payload["month"] == 4
    assert "args" not in payload
    assert "exception" not in payload


def test_json_formatter_stringifies_unknown_values():
    from datetime import date

    payload = json.loads(JsonFormatter().format(_record(day=date(2024, 1, 5))))

    assert payload["day"] == "2024-01-05"
