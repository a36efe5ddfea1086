"""Match endpoints.

POST   /problems/{id}/match   -- set the caller's role on a problem
DELETE /problems/{id}/match   -- remove the caller's match
GET    /problems/{id}/users   -- collaborators of a problem (public)
GET    /me/matches            -- the caller's matched problems
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.core.constants import MY_MATCHES_DEFAULT_LIMIT
from app.core.dependencies import get_ledger, require_user_id
from app.core.errors import unwrap
from app.models.match import (
    CollaboratorListResponse,
    MatchRequest,
    MatchResponse,
    MyMatchListResponse,
    OkResponse,
)
from app.services.matches import MatchLedger

router = APIRouter()


@router.post("/problems/{problem_id}/match", response_model=MatchResponse)
def set_match(
    problem_id: str,
    body: MatchRequest,
    user_id: str = Depends(require_user_id),
    ledger: MatchLedger = Depends(get_ledger),
) -> MatchResponse:
    """Match the caller to a problem as SOLVER or AFFECTED (upsert)."""
    return MatchResponse(match=unwrap(ledger.set_match(user_id, problem_id, body.role)))


@router.delete("/problems/{problem_id}/match", response_model=OkResponse)
def remove_match(
    problem_id: str,
    user_id: str = Depends(require_user_id),
    ledger: MatchLedger = Depends(get_ledger),
) -> OkResponse:
    unwrap(ledger.remove_match(user_id, problem_id))
    return OkResponse()


@router.get("/problems/{problem_id}/users", response_model=CollaboratorListResponse)
def list_collaborators(
    problem_id: str,
    role: str | None = Query(default=None, description="SOLVER or AFFECTED"),
    ledger: MatchLedger = Depends(get_ledger),
) -> CollaboratorListResponse:
    """List users matched to a problem, most recently matched first."""
    items = unwrap(ledger.list_collaborators(problem_id, role))
    return CollaboratorListResponse(problem_id=problem_id, items=items)


@router.get("/me/matches", response_model=MyMatchListResponse)
def list_my_matches(
    limit: int = Query(
        default=MY_MATCHES_DEFAULT_LIMIT,
        description="Rows to return (default 200); capped at 500, values below 1 are raised to 1",
    ),
    user_id: str = Depends(require_user_id),
    ledger: MatchLedger = Depends(get_ledger),
) -> MyMatchListResponse:
    return MyMatchListResponse(items=unwrap(ledger.list_my_matches(user_id, limit)))
