"""Module endpoint.

Endpoint:
  - GET /api/admin/modules/{key}
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from adminstore._api._common import decode_payload
from adminstore._constants import MODULES_ENDPOINT
from adminstore._transport import Transport
from adminstore.models.module import ModulePayload, payload_type_for

_logger = logging.getLogger(__name__)


def module_endpoint(key: str) -> str:
    return f"{MODULES_ENDPOINT}/{quote(key, safe='')}"


async def fetch_module(transport: Transport, key: str) -> ModulePayload:
    """Fetch and decode the payload of module *key*.

    The payload is decoded with the schema registered for *key*, or the
    generic :class:`ModulePayload` for unregistered keys.
    """
    endpoint = module_endpoint(key)
    body = await transport.get_json(endpoint)
    payload_type = payload_type_for(key)
    _logger.debug("Module %s response decoded as %s", key, payload_type.__name__)
    return decode_payload(payload_type, body, endpoint=endpoint)
