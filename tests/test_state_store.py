from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from adminstore.models.module import ModuleState
from adminstore.models.user import AdminUser, UserRole
from adminstore.state.events import StateChange, StoreSection
from adminstore.state.policy import GenerationTracker, should_apply_response
from adminstore.state.store import AdminStoreState, StateContainer


def _dt() -> datetime:
    return datetime(2026, 1, 1, tzinfo=UTC)


def test_subscribers_see_every_replacement() -> None:
    store = StateContainer(clock=_dt)
    seen: list[StateChange] = []
    store.subscribe(seen.append)

    store.put_module("monitoring", ModuleState.started(now=_dt()))
    store.update_dashboard(loading=True)

    assert [change.section for change in seen] == [StoreSection.MODULES, StoreSection.DASHBOARD]
    assert seen[0].key == "monitoring"
    assert seen[1].key == "loading"
    assert seen[0].previous == AdminStoreState()
    assert seen[1].previous is seen[0].current
    assert seen[1].current is store.state


def test_unsubscribe_stops_notifications() -> None:
    store = StateContainer(clock=_dt)
    seen: list[StateChange] = []
    unsubscribe = store.subscribe(seen.append)

    unsubscribe()
    unsubscribe()
    store.set_permissions(("admin.read",))

    assert seen == []
    assert store.state.permissions == ("admin.read",)


def test_failing_listener_does_not_block_others() -> None:
    store = StateContainer(clock=_dt)
    seen: list[StateChange] = []

    def _broken(_change: StateChange) -> None:
        raise RuntimeError("render failed")

    store.subscribe(_broken)
    store.subscribe(seen.append)
    store.set_user(AdminUser(id="u1", email="admin@example.com", role=UserRole.ADMIN))

    assert len(seen) == 1
    assert store.state.current_user is not None
    assert store.state.current_user.role is UserRole.ADMIN


def test_previous_snapshots_are_not_mutated() -> None:
    store = StateContainer(clock=_dt)
    store.put_module("users", ModuleState.started(now=_dt()))
    snapshot = store.state

    store.put_module("scripts", ModuleState.started(now=_dt()))

    assert list(snapshot.modules) == ["users"]
    assert list(store.state.modules) == ["users", "scripts"]


def test_patch_module_creates_default_entry_with_clock() -> None:
    store = StateContainer(clock=_dt)

    module = store.patch_module("scripts", config={"dry_run": True})

    assert module.enabled is True
    assert module.loaded is False
    assert module.loading is False
    assert module.last_updated == _dt()
    assert module.config == {"dry_run": True}


def test_dashboard_update_rejects_unknown_field() -> None:
    store = StateContainer(clock=_dt)

    with pytest.raises(ValidationError):
        store.update_dashboard(modules_loaded=True)


def test_module_state_lifecycle_invariants() -> None:
    with pytest.raises(ValidationError):
        ModuleState(loading=True, loaded=True)
    with pytest.raises(ValidationError):
        ModuleState(loaded=True, error="boom")

    failed = ModuleState.failed("boom", now=_dt())
    assert failed.loaded is False
    assert failed.loading is False
    assert failed.error == "boom"


def test_generation_tracker() -> None:
    tracker = GenerationTracker()

    first = tracker.advance("modules.monitoring")
    second = tracker.advance("modules.monitoring")

    assert tracker.is_current("modules.monitoring", second)
    assert not tracker.is_current("modules.monitoring", first)
    assert tracker.current("modules.users") == 0
    assert should_apply_response(current_generation=3, response_generation=3)
    assert not should_apply_response(current_generation=3, response_generation=2)


def test_patch_module_merges_into_existing_entry() -> None:
    store = StateContainer(clock=_dt)
    store.put_module("users", ModuleState.failed("boom", now=_dt()))

    store.patch_module("users", enabled=False)

    module = store.get_module("users")
    assert module is not None
    assert module.enabled is False
    assert module.error == "boom"
    assert store.get_module("scripts") is None
