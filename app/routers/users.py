"""User directory endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_directory
from app.core.errors import unwrap
from app.models.user import UserListResponse
from app.services.directory import DirectoryService

router = APIRouter()


@router.get("/users", response_model=UserListResponse)
def list_users(directory: DirectoryService = Depends(get_directory)) -> UserListResponse:
    """List registered users, newest first."""
    return UserListResponse(items=unwrap(directory.list_identities()))
