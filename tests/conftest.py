from __future__ import annotations

import asyncio
import copy
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import pytest

from adminstore.client import AdminClient
from adminstore.exceptions import AdminTransportError
from adminstore.state.store import StateContainer

FIXED_NOW = datetime(2026, 1, 1, tzinfo=UTC)


@dataclass
class FakeAdminBackend:
    """In-memory implementation of the ``Transport`` protocol."""

    bodies: dict[str, deque[Any]] = field(default_factory=dict)
    failures: dict[str, AdminTransportError] = field(default_factory=dict)
    holds: dict[str, deque[asyncio.Event]] = field(default_factory=dict)
    calls: list[tuple[str, str]] = field(default_factory=list)
    posted: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def respond(self, endpoint: str, *bodies: Any) -> None:
        """Queue bodies for *endpoint*; the last one is repeated."""
        self.bodies[endpoint] = deque(bodies)
        self.failures.pop(endpoint, None)

    def fail_status(self, endpoint: str, status: int, reason: str) -> None:
        self.failures[endpoint] = AdminTransportError(
            f"HTTP {status} {reason} from {endpoint}",
            status_code=status,
            endpoint=endpoint,
            reason=reason,
        )

    def fail_network(self, endpoint: str) -> None:
        self.failures[endpoint] = AdminTransportError(
            f"Request to {endpoint} failed: ClientConnectorError('connection refused')",
            endpoint=endpoint,
        )

    def hold(self, endpoint: str) -> asyncio.Event:
        """Block the next call to *endpoint* until the returned event is set."""
        event = asyncio.Event()
        self.holds.setdefault(endpoint, deque()).append(event)
        return event

    def count(self, method: str, endpoint: str) -> int:
        return self.calls.count((method, endpoint))

    def _next_body(self, endpoint: str) -> Any:
        queued = self.bodies.get(endpoint)
        if not queued:
            return {}
        body = queued.popleft() if len(queued) > 1 else queued[0]
        return copy.deepcopy(body)

    async def _wait_if_held(self, endpoint: str) -> None:
        pending = self.holds.get(endpoint)
        if pending:
            await pending.popleft().wait()

    async def get_json(self, endpoint: str) -> Any:
        self.calls.append(("GET", endpoint))
        body = self._next_body(endpoint)
        failure = self.failures.get(endpoint)
        await self._wait_if_held(endpoint)
        if failure is not None:
            raise failure
        return body

    async def post_json(self, endpoint: str, body: dict[str, Any]) -> Any:
        self.calls.append(("POST", endpoint))
        self.posted.append((endpoint, dict(body)))
        failure = self.failures.get(f"POST {endpoint}")
        await self._wait_if_held(f"POST {endpoint}")
        if failure is not None:
            raise failure
        return None


async def drain() -> None:
    """Let scheduled load tasks run up to their first real suspension."""
    for _ in range(10):
        await asyncio.sleep(0)


@pytest.fixture
def backend() -> FakeAdminBackend:
    return FakeAdminBackend()


@pytest.fixture
def client(backend: FakeAdminBackend) -> AdminClient:
    return AdminClient(transport=backend, container=StateContainer(clock=lambda: FIXED_NOW))
