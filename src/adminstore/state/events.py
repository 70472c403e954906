"""State change events delivered to store subscribers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adminstore.state.store import AdminStoreState


class StoreSection(StrEnum):
    USER = "user"
    PERMISSIONS = "permissions"
    MODULES = "modules"
    DASHBOARD = "dashboard"


@dataclass(frozen=True, slots=True)
class StateChange:
    """One atomic replacement of the store state.

    ``key`` names the module entry or dashboard field that changed, when
    the change is narrower than the whole section.
    """

    section: StoreSection
    previous: AdminStoreState
    current: AdminStoreState
    observed_at: datetime
    key: str | None = None
