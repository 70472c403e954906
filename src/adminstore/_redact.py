"""Redaction of admin API bodies for trace logging.

Shopify snapshots embed customer details in recent orders, and module
payloads can list user emails. Keys are compared after dropping case,
underscores and dashes, so ``customer_email``, ``customerEmail`` and
``Customer-Email`` are treated alike.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REDACTED = "<redacted>"

#: Keys whose scalar value is masked.
_SECRET_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "token",
        "accesstoken",
        "refreshtoken",
        "ordertoken",
        "carttoken",
        "apikey",
        "authorization",
        "cookie",
        "secret",
        "email",
        "customeremail",
        "phone",
    }
)

#: Keys whose whole value (object or list) is masked.
_PERSONAL_OBJECT_KEYS: frozenset[str] = frozenset(
    {
        "customer",
        "billingaddress",
        "shippingaddress",
    }
)

_MAX_DEPTH = 20


def _normalize_key(key: Any) -> str:
    return str(key).lower().replace("_", "").replace("-", "")


def _is_sensitive(key: Any) -> bool:
    normalized = _normalize_key(key)
    return normalized in _SECRET_KEYS or normalized in _PERSONAL_OBJECT_KEYS


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of *value* that is safe to pass to a DEBUG log call.

    Only JSON-shaped data is walked; anything else is logged by ``repr``.
    """
    if _depth > _MAX_DEPTH:
        return "<max-depth>"

    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}...<truncated>"
    if isinstance(value, Mapping):
        return {
            str(key): REDACTED if _is_sensitive(key) else redact_for_log(item, max_string=max_string, _depth=_depth + 1)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item, max_string=max_string, _depth=_depth + 1) for item in value]
    return repr(value)
