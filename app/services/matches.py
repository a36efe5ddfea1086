"""Match ledger: the (user, problem, role) relation.

The store owns the ``unique(user_id, problem_id)`` constraint, so creating
and changing a match is a single upsert resolved by the store's
``ON CONFLICT`` clause.  Changing the role also rewrites ``created_at``
(a ``before update`` trigger stamps the database clock), which therefore
reads as "last matched at".
"""

from __future__ import annotations

import logging
from typing import Any

from supabase import Client

from app.core.constants import (
    COLLABORATORS_LIST_LIMIT,
    MATCH_COLUMNS,
    MY_MATCHES_DEFAULT_LIMIT,
    MY_MATCHES_MAX_LIMIT,
    PROBLEM_COLUMNS,
)
from app.core.result import Err, Ok, Result, not_found, store_error, validation_error
from app.core.validation import is_uuid
from app.db.supabase import execute
from app.models.enums import MatchRole
from app.models.match import Collaborator, Match, MatchCreate, MyMatch
from app.models.problem import Problem
from app.models.user import UserSummary

logger = logging.getLogger(__name__)

_PROBLEM_ID_ERROR = "problem id must be a uuid"


def parse_role(value: Any) -> MatchRole | None:
    """Return the ``MatchRole`` for an exact role string, else None."""
    if isinstance(value, MatchRole):
        return value
    try:
        return MatchRole(value)
    except ValueError:
        return None


def parse_role_filter(value: str | None) -> MatchRole | None:
    """Case-insensitive role filter; anything unrecognized means "no filter"."""
    if not value:
        return None
    return parse_role(value.strip().upper())


def clamp_limit(limit: int | None) -> int:
    if limit is None:
        return MY_MATCHES_DEFAULT_LIMIT
    return max(1, min(limit, MY_MATCHES_MAX_LIMIT))


class MatchLedger:
    def __init__(self, client: Client) -> None:
        self._client = client

    def _problem_exists(self, problem_id: str) -> Result[bool]:
        result = execute(
            self._client.table("problems").select("id").eq("id", problem_id).limit(1),
            "problem_exists",
        )
        if isinstance(result, Err):
            return result
        return Ok(bool(result.value))

    def set_match(self, user_id: str, problem_id: str, role: Any) -> Result[Match]:
        """Create the match or overwrite its role; returns the stored row."""
        if not is_uuid(problem_id):
            return validation_error(_PROBLEM_ID_ERROR)
        parsed_role = parse_role(role)
        if parsed_role is None:
            return validation_error("role must be SOLVER or AFFECTED")

        exists = self._problem_exists(problem_id)
        if isinstance(exists, Err):
            return exists
        if not exists.value:
            return not_found("Problem not found")

        payload = MatchCreate(
            user_id=user_id, problem_id=problem_id, role=parsed_role
        ).model_dump(mode="json")

        result = execute(
            self._client.table("problem_matches").upsert(
                payload, on_conflict="user_id,problem_id"
            ),
            "set_match",
        )
        if isinstance(result, Err):
            return result
        if not result.value:
            return store_error("Upsert returned no row")

        row = {key: result.value[0].get(key) for key in MATCH_COLUMNS.split(", ")}
        logger.info(
            "match_upserted",
            extra={"user_id": user_id, "problem_id": problem_id, "role": parsed_role.value},
        )
        return Ok(Match(**row))

    def remove_match(self, user_id: str, problem_id: str) -> Result[None]:
        """Delete the match if present; deleting nothing is still a success."""
        if not is_uuid(problem_id):
            return validation_error(_PROBLEM_ID_ERROR)

        result = execute(
            self._client.table("problem_matches")
            .delete()
            .eq("user_id", user_id)
            .eq("problem_id", problem_id),
            "remove_match",
        )
        if isinstance(result, Err):
            return result

        logger.info(
            "match_removed",
            extra={"user_id": user_id, "problem_id": problem_id, "deleted": len(result.value)},
        )
        return Ok(None)

    def list_collaborators(
        self, problem_id: str, role_filter: str | None = None
    ) -> Result[list[Collaborator]]:
        """Users matched to a problem, most recently matched first."""
        if not is_uuid(problem_id):
            return validation_error(_PROBLEM_ID_ERROR)

        query = (
            self._client.table("problem_matches")
            .select("role, created_at, users (id, display_name)")
            .eq("problem_id", problem_id)
            .order("created_at", desc=True)
            .limit(COLLABORATORS_LIST_LIMIT)
        )
        role = parse_role_filter(role_filter)
        if role is not None:
            query = query.eq("role", role.value)

        result = execute(query, "list_collaborators")
        if isinstance(result, Err):
            return result

        items: list[Collaborator] = []
        for row in result.value:
            user = row.get("users") or {}
            items.append(
                Collaborator(
                    user=UserSummary(id=user.get("id"), display_name=user.get("display_name")),
                    role=row["role"],
                    matched_at=row["created_at"],
                )
            )
        return Ok(items)

    def list_my_matches(self, user_id: str, limit: int | None = None) -> Result[list[MyMatch]]:
        """Problems the user is matched to, most recently matched first.

        Rows whose problem no longer resolves are skipped.
        """
        result = execute(
            self._client.table("problem_matches")
            .select(f"role, created_at, problems ({PROBLEM_COLUMNS})")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(clamp_limit(limit)),
            "list_my_matches",
        )
        if isinstance(result, Err):
            return result

        items = [
            MyMatch(
                role=row["role"],
                matched_at=row["created_at"],
                problem=Problem(**row["problems"]),
            )
            for row in result.value
            if row.get("problems")
        ]
        return Ok(items)
