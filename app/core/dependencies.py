"""FastAPI dependencies resolving the services built at startup."""

from __future__ import annotations

from fastapi import Depends, Header, Request

from app.core.errors import unwrap
from app.services.directory import DirectoryService
from app.services.identity import IdentityIssuer
from app.services.matches import MatchLedger
from app.services.problems import ProblemCatalog


def get_identity_issuer(request: Request) -> IdentityIssuer:
    return request.app.state.identity_issuer


def get_directory(request: Request) -> DirectoryService:
    return request.app.state.directory


def get_catalog(request: Request) -> ProblemCatalog:
    return request.app.state.catalog


def get_ledger(request: Request) -> MatchLedger:
    return request.app.state.ledger


def require_user_id(
    authorization: str | None = Header(default=None),
    issuer: IdentityIssuer = Depends(get_identity_issuer),
) -> str:
    """Return the user id from a valid bearer token, or fail with 401."""
    return unwrap(issuer.verify_token(authorization))
