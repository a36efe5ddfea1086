"""Pydantic models for the ``problem_matches`` table and its joined views."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import MatchRole
from app.models.problem import Problem
from app.models.user import UserSummary


class MatchRequest(BaseModel):
    """Body of ``POST /problems/{id}/match``."""
    role: MatchRole


class MatchCreate(BaseModel):
    """Payload for inserting or upserting a match."""
    user_id: UUID
    problem_id: UUID
    role: MatchRole


class Match(BaseModel):
    """Full match record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    problem_id: UUID
    role: MatchRole
    created_at: datetime


class MatchResponse(BaseModel):
    ok: bool = True
    match: Match


class OkResponse(BaseModel):
    ok: bool = True


class Collaborator(BaseModel):
    """One user matched to a problem."""
    user: UserSummary
    role: MatchRole
    matched_at: datetime


class CollaboratorListResponse(BaseModel):
    problem_id: UUID = Field(serialization_alias="problemId")
    items: list[Collaborator]


class MyMatch(BaseModel):
    """One problem the authenticated user is matched to."""
    role: MatchRole
    matched_at: datetime
    problem: Problem


class MyMatchListResponse(BaseModel):
    items: list[MyMatch]
