"""Module registry operations for :class:`adminstore.client.AdminClient`.

These functions keep `client.py` small without changing the public API.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from adminstore._api.modules import fetch_module
from adminstore._client._common import LOAD_ERRORS, describe_failure, stale_result
from adminstore.models.module import ModulePayload, ModuleState
from adminstore.models.requests import ModuleRequest
from adminstore.models.results import LoadResult

if TYPE_CHECKING:
    from adminstore.client import AdminClient

_logger = logging.getLogger(__name__)


def module_resource(key: str) -> str:
    return f"modules.{key}"


async def load_module(client: AdminClient, key: str, *, force: bool = False) -> LoadResult[ModulePayload]:
    request = ModuleRequest(key=key, force=force)
    transport = client._require_transport()
    container = client.container
    resource = module_resource(request.key)

    async def _load(generation: int) -> LoadResult[ModulePayload]:
        container.put_module(request.key, ModuleState.started(now=container.now()))
        try:
            payload = await fetch_module(transport, request.key)
        except asyncio.CancelledError:
            if client._generations.is_current(resource, generation):
                container.put_module(
                    request.key, ModuleState.failed("Module load cancelled", now=container.now())
                )
            raise
        except LOAD_ERRORS as exc:
            if not client._generations.is_current(resource, generation):
                return stale_result(resource, generation)
            kind, message = describe_failure(exc, "Failed to load module")
            _logger.error("Module %s failed to load: %s", request.key, message)
            container.put_module(request.key, ModuleState.failed(message, now=container.now()))
            return LoadResult.failure(resource, kind, message)

        if not client._generations.is_current(resource, generation):
            return stale_result(resource, generation)
        container.put_module(request.key, ModuleState.succeeded(payload, now=container.now()))
        return LoadResult.success(resource, payload)

    return await client._run_once(resource, _load, force=request.force)


def update_module_state(client: AdminClient, key: str, **patch: Any) -> ModuleState:
    request = ModuleRequest(key=key)
    return client.container.patch_module(request.key, **patch)
