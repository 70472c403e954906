"""adminstore - Async resource store for an admin dashboard API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("adminstore")
except PackageNotFoundError:
    __version__ = "0+local"
from adminstore.client import AdminClient
from adminstore.config import AdminConfig
from adminstore.exceptions import (
    AdminClientError,
    AdminConfigError,
    AdminError,
    AdminPayloadError,
    AdminTransportError,
)
from adminstore.models import (
    AdminUser,
    ConversionData,
    DashboardModule,
    DashboardRefresh,
    DashboardState,
    DashboardStats,
    ErrorKind,
    HealthStatus,
    LoadResult,
    ModulePayload,
    ModuleState,
    MonitoringModule,
    RealtimeStats,
    ScriptsModule,
    ShopifyIntegration,
    SyncResult,
    UserRole,
    UsersModule,
)
from adminstore.state.events import StateChange, StoreSection
from adminstore.state.store import AdminStoreState, StateContainer

__all__ = [
    "__version__",
    "AdminClient",
    "AdminClientError",
    "AdminConfig",
    "AdminConfigError",
    "AdminError",
    "AdminPayloadError",
    "AdminStoreState",
    "AdminTransportError",
    "AdminUser",
    "ConversionData",
    "DashboardModule",
    "DashboardRefresh",
    "DashboardState",
    "DashboardStats",
    "ErrorKind",
    "HealthStatus",
    "LoadResult",
    "ModulePayload",
    "ModuleState",
    "MonitoringModule",
    "RealtimeStats",
    "ScriptsModule",
    "ShopifyIntegration",
    "StateChange",
    "StateContainer",
    "StoreSection",
    "SyncResult",
    "UserRole",
    "UsersModule",
]
