"""Admin user model."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from adminstore.models._base import AdminBaseModel, AdminEnum


class UserRole(AdminEnum):
    ADMIN = "admin"
    USER = "user"
    VIEWER = "viewer"

    @classmethod
    def _fallback(cls) -> UserRole:
        return cls.VIEWER


class AdminUser(AdminBaseModel):
    """The signed-in dashboard user."""

    id: str
    email: str
    role: UserRole = UserRole.VIEWER
    permissions: tuple[str, ...] = ()
    created_at: datetime | None = Field(default=None)

    @field_validator("id")
    @classmethod
    def _id_non_empty(cls, value: str) -> str:
        user_id = value.strip()
        if not user_id:
            raise ValueError("id must be non-empty")
        return user_id
