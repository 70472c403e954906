"""Shopify integration snapshot model.

The snapshot is always fully shaped: every nested section has defaults,
and :meth:`ShopifyIntegration.degraded` builds the zero/critical variant
used when the live fetch fails, so consumers never need ``None`` checks
below the top level.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adminstore.models._base import AdminBaseModel, AdminEnum, ApiPayload


class HealthStatus(AdminEnum):
    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"

    @classmethod
    def _fallback(cls) -> HealthStatus:
        return cls.CRITICAL


class SyncHealth(AdminBaseModel):
    health_status: HealthStatus = HealthStatus.CRITICAL
    sync_success_rate: float = 0
    total_orders: int = 0
    synced_orders: int = 0
    pending_sync: int = 0


class SyncActivity(AdminBaseModel):
    synced_last_24h: int = Field(default=0, alias="syncedLast24h")
    total_last_24h: int = Field(default=0, alias="totalLast24h")
    recent_sync_rate: float = 0
    avg_sync_time_minutes: float = 0


class IntegrationErrors(AdminBaseModel):
    error_count: int = 0
    last_error: str | None = None
    last_error_at: datetime | None = None


class FulfillmentCount(AdminBaseModel):
    status: str
    count: int = 0


class PendingOrders(AdminBaseModel):
    count: int = 0
    oldest_pending_at: datetime | None = None


class _SnakeCaseRecord(BaseModel):
    # Shop and order records are forwarded from Shopify with snake_case keys.
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)


class ShopInfo(_SnakeCaseRecord):
    name: str = ""
    domain: str = ""
    currency: str = ""
    country: str = ""
    plan_name: str = ""


class ShopifyOrder(_SnakeCaseRecord):
    id: str
    order_number: str = ""
    customer_email: str | None = None
    total_price: float = 0
    created_at: datetime | None = None
    financial_status: str | None = None
    fulfillment_status: str | None = None
    currency: str = ""


class InventoryLevel(_SnakeCaseRecord):
    id: str
    title: str = ""
    handle: str = ""
    total_inventory: int = 0
    variants_count: int = 0


class ShopifyMetrics(AdminBaseModel):
    total_orders: int = 0
    total_revenue: float = 0
    total_products: int = 0
    total_customers: int = 0
    orders_change: str = ""
    revenue_change: str = ""
    shop_info: ShopInfo | None = None
    recent_orders: list[ShopifyOrder] = Field(default_factory=list)
    inventory_levels: list[InventoryLevel] = Field(default_factory=list)


class ShopifyIntegration(ApiPayload):
    """Commerce integration snapshot shown on the dashboard.

    Parameters
    ----------
    is_connected : bool
        Whether the store is reachable with valid credentials.
    last_sync : datetime or None
        Completion time of the last order sync.
    error : str or None
        Message of the failure that produced a degraded snapshot.
    shopify_data : ShopifyMetrics or None
        Store-side metrics; ``None`` when not connected.
    sync_health : SyncHealth
        Aggregate sync health and order counts.
    recent_activity : SyncActivity
        Sync activity over the last 24 hours.
    errors : IntegrationErrors
        Error counter and most recent error.
    fulfillment : list of FulfillmentCount
        Order counts per fulfillment status.
    pending_orders : PendingOrders
        Orders waiting to be synced.
    """

    is_connected: bool = False
    last_sync: datetime | None = None
    error: str | None = None
    shopify_data: ShopifyMetrics | None = None
    sync_health: SyncHealth = Field(default_factory=SyncHealth)
    recent_activity: SyncActivity = Field(default_factory=SyncActivity)
    errors: IntegrationErrors = Field(default_factory=IntegrationErrors)
    fulfillment: list[FulfillmentCount] = Field(default_factory=list)
    pending_orders: PendingOrders = Field(default_factory=PendingOrders)

    @classmethod
    def degraded(cls, message: str, *, now: datetime) -> ShopifyIntegration:
        """Build the zeroed, critical snapshot substituted for a failed fetch."""
        return cls(
            is_connected=False,
            last_sync=None,
            error=message,
            shopify_data=None,
            sync_health=SyncHealth(health_status=HealthStatus.CRITICAL),
            recent_activity=SyncActivity(),
            errors=IntegrationErrors(error_count=1, last_error=message, last_error_at=now),
            fulfillment=[],
            pending_orders=PendingOrders(),
            raw={},
        )

    @property
    def is_degraded(self) -> bool:
        return not self.is_connected and self.errors.error_count > 0
