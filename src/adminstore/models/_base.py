"""Base models and enum for admin API payloads and store records.

Every admin model inherits from :class:`AdminBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase API keys map
  automatically to snake_case fields.
* ``frozen=True`` so state records can only change by replacement.

Models decoded from HTTP responses inherit from :class:`ApiPayload`,
which additionally stashes the original payload in ``raw``.

String enums inherit from :class:`AdminEnum` which matches values
case-insensitively and lets a subclass name a fallback member for values
the API sends without a mapping.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class AdminEnum(StrEnum):
    """Base for admin API string enums."""

    @classmethod
    def _fallback(cls) -> AdminEnum | None:
        return None

    @classmethod
    def _missing_(cls, value: object) -> AdminEnum | None:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls._fallback()


class AdminBaseModel(BaseModel):
    """Base for admin records (camelCase on the wire, immutable in memory)."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class ApiPayload(AdminBaseModel):
    """Base for models decoded from an admin API response body."""

    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # Keep a caller-supplied raw (kwargs construction); otherwise the
        # validated dict is the payload as received.
        if "raw" in values:
            return values
        merged = dict(values)
        merged["raw"] = dict(values)
        return merged
