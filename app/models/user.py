"""Pydantic models for the ``users`` table.

Users are created by seeding or an admin and never mutated by the API.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Payload for inserting a user (seeding only)."""
    display_name: str | None = None


class User(BaseModel):
    """Full user record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    display_name: str | None = None
    created_at: datetime


class UserSummary(BaseModel):
    """User fields embedded in a collaborator row."""
    id: UUID | None = None
    display_name: str | None = None


class UserListResponse(BaseModel):
    items: list[User]


class MeResponse(BaseModel):
    user: User
