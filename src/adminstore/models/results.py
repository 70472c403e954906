"""Typed outcomes of store actions.

Loaders still apply their error policy to the store; the result makes the
same outcome visible to the caller without inspecting state or logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    INVALID_PAYLOAD = "invalid_payload"
    STALE = "stale"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class LoadResult(Generic[T]):
    """Outcome of one resource load."""

    resource: str
    value: T | None = None
    error_kind: ErrorKind | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, resource: str, value: T) -> LoadResult[T]:
        return cls(resource=resource, value=value)

    @classmethod
    def failure(cls, resource: str, kind: ErrorKind, message: str) -> LoadResult[T]:
        return cls(resource=resource, error_kind=kind, error=message)


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Caller-facing outcome of the integration sync trigger."""

    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None


@dataclass(frozen=True, slots=True)
class DashboardRefresh:
    """Results of one concurrent refresh of the four dashboard feeds."""

    stats: LoadResult
    realtime_stats: LoadResult
    conversion_data: LoadResult
    shopify_data: LoadResult

    @property
    def ok(self) -> bool:
        return all(
            result.ok for result in (self.stats, self.realtime_stats, self.conversion_data, self.shopify_data)
        )

    @property
    def failed(self) -> list[str]:
        return [
            result.resource
            for result in (self.stats, self.realtime_stats, self.conversion_data, self.shopify_data)
            if not result.ok
        ]
