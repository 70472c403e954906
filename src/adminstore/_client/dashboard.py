"""Dashboard feed operations for :class:`adminstore.client.AdminClient`.

The primary stats feed is fail-closed: a failure clears ``loaded`` and
keeps whatever ``stats`` were there. Realtime and conversion feeds are
fail-open: a failure keeps the previous value and never touches the
``loading``/``loaded`` flags.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from adminstore._api.dashboard import fetch_conversion_data, fetch_dashboard_stats, fetch_realtime_stats
from adminstore._client._common import LOAD_ERRORS, describe_failure, stale_result
from adminstore._client.shopify import load_shopify_data
from adminstore._transport import Transport
from adminstore.models.dashboard import ConversionData, DashboardModule, DashboardState, DashboardStats, RealtimeStats
from adminstore.models.results import DashboardRefresh, LoadResult

if TYPE_CHECKING:
    from adminstore.client import AdminClient

_logger = logging.getLogger(__name__)

T = TypeVar("T")

STATS_RESOURCE = "dashboard.stats"
REALTIME_RESOURCE = "dashboard.realtime"
CONVERSIONS_RESOURCE = "dashboard.conversions"


async def load_dashboard_stats(client: AdminClient, *, force: bool = False) -> LoadResult[DashboardStats]:
    transport = client._require_transport()
    container = client.container

    async def _load(generation: int) -> LoadResult[DashboardStats]:
        container.update_dashboard(loading=True)
        try:
            stats = await fetch_dashboard_stats(transport)
        except asyncio.CancelledError:
            # Keep stats and loaded as they were before this load started.
            if client._generations.is_current(STATS_RESOURCE, generation):
                container.update_dashboard(loading=False)
            raise
        except LOAD_ERRORS as exc:
            if not client._generations.is_current(STATS_RESOURCE, generation):
                return stale_result(STATS_RESOURCE, generation)
            kind, message = describe_failure(exc, "Failed to load dashboard stats")
            _logger.error(message)
            container.update_dashboard(loading=False, loaded=False)
            return LoadResult.failure(STATS_RESOURCE, kind, message)

        if not client._generations.is_current(STATS_RESOURCE, generation):
            return stale_result(STATS_RESOURCE, generation)
        container.update_dashboard(stats=stats, loaded=True, loading=False)
        return LoadResult.success(STATS_RESOURCE, stats)

    return await client._run_once(STATS_RESOURCE, _load, force=force)


async def _load_optional_feed(
    client: AdminClient,
    *,
    resource: str,
    field: str,
    label: str,
    fetch: Callable[[Transport], Awaitable[T]],
    force: bool,
) -> LoadResult[T]:
    transport = client._require_transport()
    container = client.container

    async def _load(generation: int) -> LoadResult[T]:
        try:
            value = await fetch(transport)
        except LOAD_ERRORS as exc:
            if not client._generations.is_current(resource, generation):
                return stale_result(resource, generation)
            kind, message = describe_failure(exc, f"Failed to load {label}")
            # Non-critical feed: the previous value stays in place.
            _logger.warning(message)
            return LoadResult.failure(resource, kind, message)

        if not client._generations.is_current(resource, generation):
            return stale_result(resource, generation)
        container.update_dashboard(**{field: value})
        return LoadResult.success(resource, value)

    return await client._run_once(resource, _load, force=force)


async def load_realtime_stats(client: AdminClient, *, force: bool = False) -> LoadResult[RealtimeStats]:
    return await _load_optional_feed(
        client,
        resource=REALTIME_RESOURCE,
        field="realtime_stats",
        label="realtime stats",
        fetch=fetch_realtime_stats,
        force=force,
    )


async def load_conversion_data(client: AdminClient, *, force: bool = False) -> LoadResult[ConversionData]:
    return await _load_optional_feed(
        client,
        resource=CONVERSIONS_RESOURCE,
        field="conversion_data",
        label="conversion data",
        fetch=fetch_conversion_data,
        force=force,
    )


async def refresh_dashboard(client: AdminClient) -> DashboardRefresh:
    """Load all four dashboard feeds concurrently."""
    stats, realtime, conversions, shopify = await asyncio.gather(
        load_dashboard_stats(client),
        load_realtime_stats(client),
        load_conversion_data(client),
        load_shopify_data(client),
    )
    refresh = DashboardRefresh(
        stats=stats,
        realtime_stats=realtime,
        conversion_data=conversions,
        shopify_data=shopify,
    )
    if not refresh.ok:
        _logger.info("Dashboard refreshed with failed feeds: %s", ", ".join(refresh.failed))
    return refresh


def set_dashboard_modules(client: AdminClient, modules: Iterable[DashboardModule | dict[str, Any]]) -> DashboardState:
    cards = tuple(
        module if isinstance(module, DashboardModule) else DashboardModule.model_validate(module)
        for module in modules
    )
    return client.container.update_dashboard(modules=cards)
