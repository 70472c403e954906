"""Data models for admin API payloads and store records."""

from adminstore.models._base import AdminBaseModel, AdminEnum, ApiPayload
from adminstore.models.dashboard import (
    ConversionData,
    DashboardModule,
    DashboardState,
    DashboardStats,
    RealtimeStats,
)
from adminstore.models.integration import (
    FulfillmentCount,
    HealthStatus,
    IntegrationErrors,
    PendingOrders,
    ShopifyIntegration,
    ShopifyMetrics,
    SyncActivity,
    SyncHealth,
)
from adminstore.models.module import (
    MODULE_PAYLOADS,
    ModulePayload,
    ModuleState,
    MonitoringModule,
    ScriptsModule,
    UsersModule,
    payload_type_for,
)
from adminstore.models.results import DashboardRefresh, ErrorKind, LoadResult, SyncResult
from adminstore.models.user import AdminUser, UserRole

__all__ = [
    "AdminBaseModel",
    "AdminEnum",
    "AdminUser",
    "ApiPayload",
    "ConversionData",
    "DashboardModule",
    "DashboardRefresh",
    "DashboardState",
    "DashboardStats",
    "ErrorKind",
    "FulfillmentCount",
    "HealthStatus",
    "IntegrationErrors",
    "LoadResult",
    "MODULE_PAYLOADS",
    "ModulePayload",
    "ModuleState",
    "MonitoringModule",
    "PendingOrders",
    "RealtimeStats",
    "ScriptsModule",
    "ShopifyIntegration",
    "ShopifyMetrics",
    "SyncActivity",
    "SyncHealth",
    "SyncResult",
    "UserRole",
    "UsersModule",
    "payload_type_for",
]
