"""Client configuration for adminstore."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from adminstore._constants import BASE_URL, DEFAULT_REQUEST_TIMEOUT, USER_AGENT
from adminstore.exceptions import AdminConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise AdminConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class AdminConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Origin of the admin API, without a trailing slash.
    request_timeout : float
        Total timeout in seconds for a single HTTP request.
    user_agent : str
        ``User-Agent`` header sent with every request.
    api_trace_enabled : bool
        Log (redacted) request and response bodies at DEBUG level.
    """

    base_url: str = BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = USER_AGENT
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        base_url = self.base_url.strip().rstrip("/")
        if not base_url:
            raise AdminConfigError("base_url must be non-empty")
        if self.request_timeout <= 0:
            raise AdminConfigError("request_timeout must be positive")
        object.__setattr__(self, "base_url", base_url)

    @classmethod
    def from_env(cls, **overrides: Any) -> AdminConfig:
        """Create configuration from environment variables.

        Reads ``ADMIN_BASE_URL``, ``ADMIN_REQUEST_TIMEOUT``,
        ``ADMIN_USER_AGENT`` and ``ADMIN_API_TRACE_ENABLED``. Explicit
        keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("ADMIN_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        user_agent = env.get("ADMIN_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        timeout_env = env.get("ADMIN_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("ADMIN_REQUEST_TIMEOUT", timeout_env)

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(env.get("ADMIN_API_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
