"""Directory service: the list of registered users."""

from __future__ import annotations

from supabase import Client

from app.core.constants import USER_COLUMNS, USERS_LIST_LIMIT
from app.core.result import Err, Ok, Result
from app.db.supabase import execute
from app.models.user import User


class DirectoryService:
    def __init__(self, client: Client) -> None:
        self._client = client

    def list_identities(self) -> Result[list[User]]:
        """Return the newest users first, capped at ``USERS_LIST_LIMIT``."""
        result = execute(
            self._client.table("users")
            .select(USER_COLUMNS)
            .order("created_at", desc=True)
            .limit(USERS_LIST_LIMIT),
            "list_identities",
        )
        if isinstance(result, Err):
            return result
        return Ok([User(**row) for row in result.value])
