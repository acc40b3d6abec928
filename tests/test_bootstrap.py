from __future__ import annotations

from src.employee_records.employee_records import main
from src.employee_records.employee_records.employees.service import EmployeeService


def test_testing_settings_are_wired_into_services(monkeypatch):
    calls = []
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(main, "setup_logging", lambda level, json_output=False: calls.append((level, json_output)))

    container = main.bootstrap()

    assert isinstance(container.employee_service, EmployeeService)
    assert container.employee_service.list_page().page_size == 10
    assert container.attendance_service.get_leave_balance("e1", 2026) == 42
    assert len(calls) == 1
    assert calls[0][1] is False


def test_settings_module_follows_app_env(monkeypatch):
    from config import get_settings_module

    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "TEST")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"
