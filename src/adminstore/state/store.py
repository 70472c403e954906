"""Injectable in-memory state container.

This is the only component allowed to replace the admin store state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

from pydantic import ConfigDict, Field

from adminstore.models._base import AdminBaseModel
from adminstore.models.dashboard import DashboardState
from adminstore.models.module import ModuleState
from adminstore.models.user import AdminUser
from adminstore.state.events import StateChange, StoreSection

_logger = logging.getLogger(__name__)

M = TypeVar("M", bound=AdminBaseModel)

Listener = Callable[[StateChange], None]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _replace(record: M, **changes: Any) -> M:
    """Build a validated copy of *record* with *changes* applied.

    Fields not named in *changes* carry over by reference; nested records
    are immutable, so nothing is shared mutably between snapshots.
    """
    fields = {name: getattr(record, name) for name in type(record).model_fields}
    fields.update(changes)
    return type(record)(**fields)


class AdminStoreState(AdminBaseModel):
    model_config = ConfigDict(extra="forbid")

    current_user: AdminUser | None = None
    permissions: tuple[str, ...] = ()
    modules: dict[str, ModuleState] = Field(default_factory=dict)
    dashboard: DashboardState = Field(default_factory=DashboardState)


class StateContainer:
    """Owner of the current :class:`AdminStoreState`.

    Every mutation replaces the state record and synchronously notifies
    subscribers with a :class:`StateChange`. Running on a single event loop,
    each replacement is atomic with respect to other mutations.
    """

    def __init__(
        self,
        initial: AdminStoreState | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._state = initial if initial is not None else AdminStoreState()
        self._clock = clock
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AdminStoreState:
        return self._state

    def now(self) -> datetime:
        return self._clock()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _commit(self, section: StoreSection, new_state: AdminStoreState, *, key: str | None = None) -> None:
        previous = self._state
        self._state = new_state
        change = StateChange(
            section=section,
            previous=previous,
            current=new_state,
            observed_at=self._clock(),
            key=key,
        )
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                _logger.debug("State listener failed for section=%s key=%s", section, key, exc_info=True)

    # ------------------------------------------------------------------
    # User
    # ------------------------------------------------------------------

    def set_user(self, user: AdminUser | None) -> None:
        self._commit(StoreSection.USER, _replace(self._state, current_user=user))

    def set_permissions(self, permissions: tuple[str, ...]) -> None:
        self._commit(StoreSection.PERMISSIONS, _replace(self._state, permissions=permissions))

    # ------------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------------

    def get_module(self, key: str) -> ModuleState | None:
        return self._state.modules.get(key)

    def put_module(self, key: str, module: ModuleState) -> ModuleState:
        """Replace the entry for *key*; other entries are untouched."""
        modules = {**self._state.modules, key: module}
        self._commit(StoreSection.MODULES, _replace(self._state, modules=modules), key=key)
        return module

    def patch_module(self, key: str, **patch: Any) -> ModuleState:
        """Merge *patch* into the entry for *key*, creating a default entry first."""
        current = self.get_module(key)
        if current is None:
            current = ModuleState(last_updated=self._clock())
        return self.put_module(key, _replace(current, **patch))

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def update_dashboard(self, **changes: Any) -> DashboardState:
        """Replace the dashboard record with *changes* applied."""
        dashboard = _replace(self._state.dashboard, **changes)
        key = next(iter(changes)) if len(changes) == 1 else None
        self._commit(StoreSection.DASHBOARD, _replace(self._state, dashboard=dashboard), key=key)
        return dashboard
