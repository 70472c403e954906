"""Shared helpers for admin API endpoint modules.

It is internal to adminstore and may change at any time.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from adminstore.exceptions import AdminPayloadError

P = TypeVar("P", bound=BaseModel)


def decode_payload(model: type[P], body: Any, *, endpoint: str) -> P:
    """Validate a decoded JSON body against *model*.

    Raises :class:`AdminPayloadError` when the body is not a JSON object or
    does not match the schema.
    """
    if not isinstance(body, dict):
        raise AdminPayloadError(
            f"{endpoint} returned {type(body).__name__}, expected a JSON object",
            endpoint=endpoint,
        )
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise AdminPayloadError(
            f"{endpoint} payload does not match {model.__name__}: {exc.error_count()} error(s)",
            endpoint=endpoint,
        ) from exc
