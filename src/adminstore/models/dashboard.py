"""Dashboard feed models and the aggregated dashboard state."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from adminstore.models._base import AdminBaseModel, ApiPayload
from adminstore.models.integration import HealthStatus, ShopifyIntegration


class DashboardStats(ApiPayload):
    """Headline metrics of the primary dashboard feed."""

    total_users: int = 0
    total_orders: int = 0
    revenue: float = 0
    conversion_rate: float = 0
    total_users_change: str = ""
    total_orders_change: str = ""
    revenue_change: str = ""
    conversion_rate_change: str = ""


class WebhookEvents(AdminBaseModel):
    last_24_hours: int = Field(default=0, alias="last24Hours")
    success_rate: float = 0
    failed: int = 0


class RecentActivity(AdminBaseModel):
    orders_last_hour: int = 0
    revenue_last_hour: float = 0
    users_last_hour: int = 0
    active_sessions: int = 0


class SystemHealth(AdminBaseModel):
    health_score: float = 0
    pending_orders: int = 0
    processing_orders: int = 0
    failed_webhooks: int = 0
    status: HealthStatus = HealthStatus.CRITICAL


class RealtimeStats(ApiPayload):
    timestamp: datetime | None = None
    webhook_events: WebhookEvents = Field(default_factory=WebhookEvents)
    recent_activity: RecentActivity = Field(default_factory=RecentActivity)
    system_health: SystemHealth = Field(default_factory=SystemHealth)


class ConversionFunnel(AdminBaseModel):
    total_users: int = 0
    initiated_orders: int = 0
    completed_orders: int = 0
    visit_to_order_rate: float = 0
    order_to_payment_rate: float = 0
    overall_conversion_rate: float = 0


class ConversionRates(AdminBaseModel):
    overall: float = 0
    order_completion: float = 0
    last_30_days: float = Field(default=0, alias="last30Days")
    last_7_days: float = Field(default=0, alias="last7Days")


class PeriodMetrics(AdminBaseModel):
    users: int = 0
    orders: int = 0
    conversion_rate: float = 0


class PeriodComparison(AdminBaseModel):
    all_time: PeriodMetrics = Field(default_factory=PeriodMetrics)
    last_30_days: PeriodMetrics = Field(default_factory=PeriodMetrics, alias="last30Days")
    last_7_days: PeriodMetrics = Field(default_factory=PeriodMetrics, alias="last7Days")


class ProductPerformance(AdminBaseModel):
    color: str
    initiated: int = 0
    completed: int = 0
    conversion_rate: float = 0


class RevenueMetrics(AdminBaseModel):
    average_order_value: float = 0
    total_revenue: float = 0
    revenue_per_user: float = 0


class ConversionData(ApiPayload):
    funnel: ConversionFunnel = Field(default_factory=ConversionFunnel)
    conversion_rates: ConversionRates = Field(default_factory=ConversionRates)
    period_comparison: PeriodComparison = Field(default_factory=PeriodComparison)
    product_performance: list[ProductPerformance] = Field(default_factory=list)
    revenue_metrics: RevenueMetrics = Field(default_factory=RevenueMetrics)


class DashboardModule(AdminBaseModel):
    """A feature card shown on the dashboard."""

    id: str
    title: str
    description: str = ""
    href: str | None = None
    disabled: bool = False
    button_text: str = ""
    coming_soon_text: str | None = None


class DashboardState(AdminBaseModel):
    """Aggregated dashboard view.

    ``loading``/``loaded`` track only the primary ``stats`` feed; the other
    feeds are independent and may stay ``None`` without affecting them.
    """

    model_config = ConfigDict(extra="forbid")

    stats: DashboardStats | None = None
    realtime_stats: RealtimeStats | None = None
    conversion_data: ConversionData | None = None
    shopify_data: ShopifyIntegration | None = None
    modules: tuple[DashboardModule, ...] = ()
    loaded: bool = False
    loading: bool = False

    @property
    def is_degraded(self) -> bool:
        """Whether the primary feed has no data and no load in flight.

        Also true before the first load, so it doubles as the mount-time
        "needs loading" check.
        """
        return not self.loaded and not self.loading
