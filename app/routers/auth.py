"""Login and "who am I" endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_identity_issuer, require_user_id
from app.core.errors import unwrap
from app.models.auth import LoginRequest, LoginResponse
from app.models.user import MeResponse
from app.services.identity import IdentityIssuer

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    issuer: IdentityIssuer = Depends(get_identity_issuer),
) -> LoginResponse:
    """Exchange an existing user id for a 30-day access token."""
    return unwrap(issuer.issue_token(body.user_id))


@router.get("/me", response_model=MeResponse)
def whoami(
    user_id: str = Depends(require_user_id),
    issuer: IdentityIssuer = Depends(get_identity_issuer),
) -> MeResponse:
    return MeResponse(user=unwrap(issuer.get_identity(user_id)))
