"""Pydantic request models for client entrypoints.

These models provide a consistent "validate → normalize → execute" flow.
They are used internally by :class:`adminstore.client.AdminClient`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from adminstore._constants import SYNC_ACTION


class ModuleRequest(BaseModel):
    """Request naming a module resource."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    key: str
    force: bool = False

    @field_validator("key")
    @classmethod
    def _key_non_empty(cls, value: str) -> str:
        key = value.strip()
        if not key:
            raise ValueError("module key must be non-empty")
        return key


class SyncRequest(BaseModel):
    """Body of the integration sync trigger."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: Literal["sync"] = SYNC_ACTION
