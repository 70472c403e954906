"""Shopify integration endpoint.

Endpoint:
  - GET  /api/admin/dashboard/shopify  (snapshot)
  - POST /api/admin/dashboard/shopify  (sync trigger, body ``{"action": "sync"}``)
"""

from __future__ import annotations

from adminstore._api._common import decode_payload
from adminstore._constants import DASHBOARD_SHOPIFY_ENDPOINT
from adminstore._transport import Transport
from adminstore.models.integration import ShopifyIntegration
from adminstore.models.requests import SyncRequest


async def fetch_shopify_snapshot(transport: Transport) -> ShopifyIntegration:
    body = await transport.get_json(DASHBOARD_SHOPIFY_ENDPOINT)
    return decode_payload(ShopifyIntegration, body, endpoint=DASHBOARD_SHOPIFY_ENDPOINT)


async def trigger_shopify_sync(transport: Transport) -> None:
    """Ask the server to sync orders; any 2xx response counts as accepted."""
    await transport.post_json(DASHBOARD_SHOPIFY_ENDPOINT, SyncRequest().model_dump())
