"""High-level async client: the admin store façade."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

import aiohttp

from adminstore._client import dashboard as _dashboard
from adminstore._client import modules as _modules
from adminstore._client import shopify as _shopify
from adminstore._transport import HttpTransport, Transport
from adminstore.config import AdminConfig
from adminstore.exceptions import AdminClientError
from adminstore.models.dashboard import (
    ConversionData,
    DashboardModule,
    DashboardState,
    DashboardStats,
    RealtimeStats,
)
from adminstore.models.integration import ShopifyIntegration
from adminstore.models.module import ModulePayload, ModuleState
from adminstore.models.results import DashboardRefresh, ErrorKind, LoadResult, SyncResult
from adminstore.models.user import AdminUser
from adminstore.state.events import StateChange
from adminstore.state.policy import GenerationTracker
from adminstore.state.store import AdminStoreState, StateContainer

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class AdminClient:
    """Async store of admin dashboard resources.

    Usage::

        async with AdminClient(AdminConfig.from_env()) as client:
            client.subscribe(lambda change: render(change.current))
            await client.refresh_dashboard()
            await client.load_module("monitoring")

    A ``transport`` may be injected instead of using the context manager;
    a ``container`` may be injected to share state between consumers.
    """

    def __init__(
        self,
        config: AdminConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        container: StateContainer | None = None,
    ) -> None:
        self._config = config if config is not None else AdminConfig()
        self._external_session = session is not None
        self._http_session = session
        self._injected_transport = transport is not None
        self._transport: Transport | None = transport
        self.container = container if container is not None else StateContainer()
        self._generations = GenerationTracker()
        self._inflight: dict[str, asyncio.Task[Any]] = {}

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> AdminClient:
        if self._injected_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self._cancel_inflight()
        if self._injected_transport:
            return
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    async def _cancel_inflight(self) -> None:
        tasks = [task for task in self._inflight.values() if not task.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            _logger.debug("Cancelled %d in-flight load(s)", len(tasks))
        self._inflight.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise AdminClientError("Client not initialized. Use 'async with AdminClient(...) as client:'")
        return self._transport

    async def _run_once(
        self,
        resource: str,
        load: Callable[[int], Awaitable[LoadResult[T]]],
        *,
        force: bool = False,
    ) -> LoadResult[T]:
        """Run *load* for *resource*, joining a load already in flight.

        With ``force`` a new load always starts; the generation it takes
        makes any earlier in-flight response stale.
        """
        task = self._inflight.get(resource)
        if task is not None and not task.done() and not force:
            _logger.debug("Joining in-flight load of %s", resource)
            return await self._await_load(resource, task)

        generation = self._generations.advance(resource)
        task = asyncio.create_task(load(generation), name=f"adminstore:{resource}:{generation}")
        self._inflight[resource] = task

        def _forget(done: asyncio.Task[Any]) -> None:
            if self._inflight.get(resource) is done:
                del self._inflight[resource]

        task.add_done_callback(_forget)
        return await self._await_load(resource, task)

    async def _await_load(self, resource: str, task: asyncio.Task[LoadResult[T]]) -> LoadResult[T]:
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if not task.cancelled() or (current is not None and current.cancelling()):
                raise
            # The load itself was cancelled (client closed), not this caller.
            return LoadResult.failure(resource, ErrorKind.CANCELLED, f"{resource} load was cancelled")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> AdminConfig:
        return self._config

    @property
    def state(self) -> AdminStoreState:
        return self.container.state

    @property
    def current_user(self) -> AdminUser | None:
        return self.container.state.current_user

    @property
    def permissions(self) -> tuple[str, ...]:
        return self.container.state.permissions

    @property
    def modules(self) -> dict[str, ModuleState]:
        return self.container.state.modules

    @property
    def dashboard(self) -> DashboardState:
        return self.container.state.dashboard

    def subscribe(self, listener: Callable[[StateChange], None]) -> Callable[[], None]:
        """Call *listener* after every state change; returns an unsubscribe callable."""
        return self.container.subscribe(listener)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_user(self, user: AdminUser | None) -> None:
        self.container.set_user(user)

    def set_permissions(self, permissions: Iterable[str]) -> None:
        self.container.set_permissions(tuple(permissions))

    async def load_module(self, key: str, *, force: bool = False) -> LoadResult[ModulePayload]:
        """Load the module resource *key* into the registry."""
        return await _modules.load_module(self, key, force=force)

    def update_module_state(self, key: str, **patch: Any) -> ModuleState:
        """Merge *patch* into the registry entry for *key*."""
        return _modules.update_module_state(self, key, **patch)

    async def load_dashboard_stats(self, *, force: bool = False) -> LoadResult[DashboardStats]:
        return await _dashboard.load_dashboard_stats(self, force=force)

    async def load_realtime_stats(self, *, force: bool = False) -> LoadResult[RealtimeStats]:
        return await _dashboard.load_realtime_stats(self, force=force)

    async def load_conversion_data(self, *, force: bool = False) -> LoadResult[ConversionData]:
        return await _dashboard.load_conversion_data(self, force=force)

    async def load_shopify_data(self, *, force: bool = False) -> LoadResult[ShopifyIntegration]:
        return await _shopify.load_shopify_data(self, force=force)

    async def sync_shopify_data(self) -> SyncResult:
        """Trigger an integration sync and refresh the snapshot on success."""
        return await _shopify.sync_shopify_data(self)

    async def refresh_dashboard(self) -> DashboardRefresh:
        return await _dashboard.refresh_dashboard(self)

    def set_dashboard_modules(self, modules: Iterable[DashboardModule | dict[str, Any]]) -> DashboardState:
        return _dashboard.set_dashboard_modules(self, modules)
