from __future__ import annotations

import pytest

from adminstore.config import AdminConfig
from adminstore.exceptions import AdminConfigError


def test_defaults() -> None:
    config = AdminConfig()
    assert config.base_url == "http://localhost:3000"
    assert config.request_timeout == 30.0
    assert config.api_trace_enabled is False


def test_base_url_trailing_slash_stripped() -> None:
    assert AdminConfig(base_url="https://admin.example.com/ ").base_url == "https://admin.example.com"


def test_invalid_values_rejected() -> None:
    with pytest.raises(AdminConfigError):
        AdminConfig(base_url="  ")
    with pytest.raises(AdminConfigError):
        AdminConfig(request_timeout=0)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_BASE_URL", "https://admin.example.com")
    monkeypatch.setenv("ADMIN_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("ADMIN_API_TRACE_ENABLED", "yes")
    monkeypatch.setenv("ADMIN_USER_AGENT", "dashboard/2")

    config = AdminConfig.from_env()

    assert config.base_url == "https://admin.example.com"
    assert config.request_timeout == 5.0
    assert config.api_trace_enabled is True
    assert config.user_agent == "dashboard/2"


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_REQUEST_TIMEOUT", "not-a-number")
    monkeypatch.setenv("ADMIN_API_TRACE_ENABLED", "on")

    config = AdminConfig.from_env(request_timeout=12.5, api_trace_enabled=False)

    assert config.request_timeout == 12.5
    assert config.api_trace_enabled is False


def test_from_env_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_REQUEST_TIMEOUT", "soon")

    with pytest.raises(AdminConfigError):
        AdminConfig.from_env()
