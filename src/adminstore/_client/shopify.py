"""Shopify integration operations for :class:`adminstore.client.AdminClient`.

``load_shopify_data`` never leaves the dashboard without a fully shaped
snapshot: on failure it stores the degraded snapshot instead.
``sync_shopify_data`` is the only action with a caller-facing result
contract; it never raises for a failed sync.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from adminstore._api.shopify import fetch_shopify_snapshot, trigger_shopify_sync
from adminstore._client._common import LOAD_ERRORS, describe_failure, stale_result
from adminstore.models.integration import ShopifyIntegration
from adminstore.models.results import LoadResult, SyncResult

if TYPE_CHECKING:
    from adminstore.client import AdminClient

_logger = logging.getLogger(__name__)

SHOPIFY_RESOURCE = "dashboard.shopify"


async def load_shopify_data(client: AdminClient, *, force: bool = False) -> LoadResult[ShopifyIntegration]:
    transport = client._require_transport()
    container = client.container

    async def _load(generation: int) -> LoadResult[ShopifyIntegration]:
        try:
            snapshot = await fetch_shopify_snapshot(transport)
        except LOAD_ERRORS as exc:
            if not client._generations.is_current(SHOPIFY_RESOURCE, generation):
                return stale_result(SHOPIFY_RESOURCE, generation)
            kind, message = describe_failure(exc, "Failed to load Shopify data")
            _logger.warning(message)
            degraded = ShopifyIntegration.degraded(message, now=container.now())
            container.update_dashboard(shopify_data=degraded)
            return LoadResult(resource=SHOPIFY_RESOURCE, value=degraded, error_kind=kind, error=message)

        if not client._generations.is_current(SHOPIFY_RESOURCE, generation):
            return stale_result(SHOPIFY_RESOURCE, generation)
        container.update_dashboard(shopify_data=snapshot)
        return LoadResult.success(SHOPIFY_RESOURCE, snapshot)

    return await client._run_once(SHOPIFY_RESOURCE, _load, force=force)


async def sync_shopify_data(client: AdminClient) -> SyncResult:
    transport = client._require_transport()
    try:
        await trigger_shopify_sync(transport)
    except LOAD_ERRORS as exc:
        kind, message = describe_failure(exc, "Failed to sync Shopify data")
        _logger.error(message)
        return SyncResult(success=False, error=message, error_kind=kind)

    # Read-after-write: a load that started before the sync must not
    # satisfy the refresh.
    await load_shopify_data(client, force=True)
    return SyncResult(success=True)
