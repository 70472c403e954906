"""Per-module lifecycle record and the module payload variants.

Module payloads form a union keyed by module name: known admin features
decode into their own schema, every other key decodes into the generic
:class:`ModulePayload`. All variants accept extra keys and keep the
verbatim body in ``raw``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, ClassVar

from pydantic import ConfigDict, Field, model_validator

from adminstore.models._base import AdminBaseModel, ApiPayload
from adminstore.models.integration import HealthStatus


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ModulePayload(ApiPayload):
    """Payload of a module without a dedicated schema."""

    model_config = ConfigDict(extra="allow")

    module_key: ClassVar[str | None] = None


# ----------------------------------------------------------------------
# monitoring
# ----------------------------------------------------------------------


class MonitoringAlert(AdminBaseModel):
    id: str = ""
    level: HealthStatus = HealthStatus.WARNING
    message: str = ""
    timestamp: datetime | None = None


class MonitoringHealth(AdminBaseModel):
    status: HealthStatus = HealthStatus.HEALTHY
    alerts: list[MonitoringAlert] = Field(default_factory=list)


class PaymentMetrics(AdminBaseModel):
    total_attempts: int = 0
    successful_payments: int = 0
    failed_payments: int = 0
    success_rate: float = 0


class MonitoringModule(ModulePayload):
    module_key: ClassVar[str | None] = "monitoring"

    health_status: MonitoringHealth = Field(default_factory=MonitoringHealth)
    metrics: PaymentMetrics = Field(default_factory=PaymentMetrics)


# ----------------------------------------------------------------------
# users
# ----------------------------------------------------------------------


class UserRow(AdminBaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    email: str = ""
    role: str = ""
    created_at: datetime | None = None


class UsersPagination(AdminBaseModel):
    page: int = 1
    limit: int = 0
    total: int = 0
    pages: int = 0


class UserStat(AdminBaseModel):
    label: str = ""
    value: float = 0


class UsersModule(ModulePayload):
    module_key: ClassVar[str | None] = "users"

    users: list[UserRow] = Field(default_factory=list)
    pagination: UsersPagination | None = None
    stats: list[UserStat] = Field(default_factory=list)


# ----------------------------------------------------------------------
# scripts
# ----------------------------------------------------------------------


class ScriptsSystemHealth(AdminBaseModel):
    database: str = "unknown"
    redis: str = "unknown"
    api: str = "unknown"


class ScriptsShopifyStatus(AdminBaseModel):
    api_connection: str = "unknown"
    product_sync: str = "unknown"
    config_validation: str = "unknown"


class CoreScripts(AdminBaseModel):
    environment_validation: str = "unknown"
    build_validation: str = "unknown"
    stripe_sync: str = "unknown"


class ScriptsModule(ModulePayload):
    module_key: ClassVar[str | None] = "scripts"

    system_health: ScriptsSystemHealth = Field(default_factory=ScriptsSystemHealth)
    shopify_status: ScriptsShopifyStatus = Field(default_factory=ScriptsShopifyStatus)
    core_scripts: CoreScripts = Field(default_factory=CoreScripts)


MODULE_PAYLOADS: dict[str, type[ModulePayload]] = {
    cls.module_key: cls
    for cls in (MonitoringModule, UsersModule, ScriptsModule)
    if cls.module_key is not None
}


def payload_type_for(key: str) -> type[ModulePayload]:
    """Return the payload schema registered for *key* (generic if none)."""
    return MODULE_PAYLOADS.get(key, ModulePayload)


# ----------------------------------------------------------------------
# lifecycle record
# ----------------------------------------------------------------------


class ModuleState(AdminBaseModel):
    """Lifecycle of one named module resource.

    ``loading`` and ``loaded`` are never both true, and an ``error``
    implies ``loaded=False``.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    config: dict[str, Any] = Field(default_factory=dict)
    last_updated: datetime = Field(default_factory=_utcnow)
    loaded: bool = False
    loading: bool = False
    data: ModulePayload | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _check_lifecycle(self) -> ModuleState:
        if self.loading and self.loaded:
            raise ValueError("module cannot be loading and loaded at the same time")
        if self.error is not None and self.loaded:
            raise ValueError("module with an error cannot be loaded")
        return self

    @classmethod
    def started(cls, *, now: datetime) -> ModuleState:
        return cls(last_updated=now, loading=True)

    @classmethod
    def succeeded(cls, data: ModulePayload, *, now: datetime) -> ModuleState:
        return cls(last_updated=now, loaded=True, data=data)

    @classmethod
    def failed(cls, message: str, *, now: datetime) -> ModuleState:
        return cls(last_updated=now, error=message)
