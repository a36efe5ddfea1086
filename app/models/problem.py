"""Pydantic models for the ``problems`` table and catalogue responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProblemCreate(BaseModel):
    """Payload for inserting a problem (seeding only)."""
    title: str
    description: str
    category: str
    location: str
    country_code: str | None = None


class Problem(BaseModel):
    """Full problem record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    category: str
    location: str
    country_code: str | None = None
    created_at: datetime


class ProblemListItem(Problem):
    """Problem annotated with the number of users matched to it."""
    collaborator_count: int = Field(default=0, serialization_alias="collaboratorCount")


class ProblemFilters(BaseModel):
    """Normalized search filters; empty strings mean "not filtered"."""
    search: str = ""
    category: str = ""
    location: str = ""
    country_code: str = ""


class ProblemListResponse(BaseModel):
    items: list[ProblemListItem]
