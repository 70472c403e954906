"""Custom exception hierarchy for adminstore."""

from __future__ import annotations


class AdminError(Exception):
    """Base exception for all adminstore errors."""


class AdminConfigError(AdminError):
    """Invalid or missing configuration."""


class AdminClientError(AdminError):
    """Client used outside of its ``async with`` lifecycle."""


class AdminTransportError(AdminError):
    """HTTP-level failure (network error or non-2xx response)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
        reason: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(message)


class AdminPayloadError(AdminError):
    """Response body is not JSON or does not match the expected schema."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
    ) -> None:
        self.endpoint = endpoint
        super().__init__(message)
