"""Dashboard feed endpoints.

Endpoints:
  - GET /api/admin/dashboard/stats
  - GET /api/admin/dashboard/realtime
  - GET /api/admin/dashboard/conversions
"""

from __future__ import annotations

from adminstore._api._common import decode_payload
from adminstore._constants import (
    DASHBOARD_CONVERSIONS_ENDPOINT,
    DASHBOARD_REALTIME_ENDPOINT,
    DASHBOARD_STATS_ENDPOINT,
)
from adminstore._transport import Transport
from adminstore.models.dashboard import ConversionData, DashboardStats, RealtimeStats


async def fetch_dashboard_stats(transport: Transport) -> DashboardStats:
    body = await transport.get_json(DASHBOARD_STATS_ENDPOINT)
    return decode_payload(DashboardStats, body, endpoint=DASHBOARD_STATS_ENDPOINT)


async def fetch_realtime_stats(transport: Transport) -> RealtimeStats:
    body = await transport.get_json(DASHBOARD_REALTIME_ENDPOINT)
    return decode_payload(RealtimeStats, body, endpoint=DASHBOARD_REALTIME_ENDPOINT)


async def fetch_conversion_data(transport: Transport) -> ConversionData:
    body = await transport.get_json(DASHBOARD_CONVERSIONS_ENDPOINT)
    return decode_payload(ConversionData, body, endpoint=DASHBOARD_CONVERSIONS_ENDPOINT)
