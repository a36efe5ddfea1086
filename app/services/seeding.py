"""Demo data seeder.

Wipes the three tables and repopulates them with a fixed problem catalogue,
a batch of users and a random-but-repeatable set of matches.  Random choices
come from ``random.Random`` instances with fixed seeds, so two runs against
an empty database produce the same names and the same match layout.
"""

from __future__ import annotations

import logging
import random
from typing import Any

from supabase import Client

from app.core.constants import (
    NIL_UUID,
    SEED_DEFAULT_USER_COUNT,
    SEED_DISPLAY_NAMES,
    SEED_INSERT_BATCH_SIZE,
    SEED_MATCHES_RNG_SEED,
    SEED_MAX_LINKS_PER_USER,
    SEED_MIN_LINKS_PER_USER,
    SEED_PROBLEMS,
    SEED_SOLVER_PROBABILITY,
    SEED_USERS_RNG_SEED,
)
from app.models.enums import MatchRole
from app.models.problem import ProblemCreate
from app.models.user import UserCreate

logger = logging.getLogger(__name__)


def build_user_rows(count: int) -> list[dict[str, Any]]:
    """Return ``count`` user payloads named ``"<Name> <NN>"``."""
    rng = random.Random(SEED_USERS_RNG_SEED)
    return [
        UserCreate(display_name=f"{rng.choice(SEED_DISPLAY_NAMES)} {i + 1:02d}").model_dump()
        for i in range(count)
    ]


def build_match_rows(
    user_ids: list[str],
    problem_ids: list[str],
) -> list[dict[str, Any]]:
    """Link each user to a random set of distinct problems.

    Each user gets between ``SEED_MIN_LINKS_PER_USER`` and
    ``SEED_MAX_LINKS_PER_USER`` problems (bounded by the catalogue size),
    as SOLVER with probability ``SEED_SOLVER_PROBABILITY``.
    """
    rng = random.Random(SEED_MATCHES_RNG_SEED)
    rows: list[dict[str, Any]] = []
    seen: set[tuple[str, str]] = set()

    for user_id in user_ids:
        link_count = rng.randint(SEED_MIN_LINKS_PER_USER, SEED_MAX_LINKS_PER_USER)
        chosen = rng.sample(problem_ids, min(link_count, len(problem_ids)))
        for problem_id in chosen:
            key = (user_id, problem_id)
            if key in seen:
                continue
            seen.add(key)
            role = MatchRole.SOLVER if rng.random() < SEED_SOLVER_PROBABILITY else MatchRole.AFFECTED
            rows.append({"user_id": user_id, "problem_id": problem_id, "role": role.value})

    return rows


class Seeder:
    """Writes demo data through a Supabase client.

    Store errors propagate: a half-finished seed should stop the script.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def reset_all(self) -> None:
        """Delete every match, user and problem (children first)."""
        for table in ("problem_matches", "users", "problems"):
            self._client.table(table).delete().neq("id", NIL_UUID).execute()
            logger.info("seed_table_cleared", extra={"table": table})

    def insert_problems(self) -> list[dict[str, Any]]:
        rows = [ProblemCreate(**p).model_dump() for p in SEED_PROBLEMS]
        result = self._client.table("problems").insert(rows).execute()
        return result.data or []

    def insert_users(self, count: int = SEED_DEFAULT_USER_COUNT) -> list[dict[str, Any]]:
        result = self._client.table("users").insert(build_user_rows(count)).execute()
        return result.data or []

    def insert_matches(
        self,
        users: list[dict[str, Any]],
        problems: list[dict[str, Any]],
    ) -> int:
        """Insert generated matches in batches; returns the row count."""
        rows = build_match_rows(
            [u["id"] for u in users],
            [p["id"] for p in problems],
        )
        for start in range(0, len(rows), SEED_INSERT_BATCH_SIZE):
            batch = rows[start:start + SEED_INSERT_BATCH_SIZE]
            self._client.table("problem_matches").insert(batch).execute()
        return len(rows)

    def run_seed(self, user_count: int = SEED_DEFAULT_USER_COUNT) -> dict[str, int]:
        """Reset and repopulate all tables; returns inserted counts."""
        logger.info("seed_started")
        self.reset_all()

        problems = self.insert_problems()
        logger.info("seed_problems_inserted", extra={"count": len(problems)})

        users = self.insert_users(user_count)
        logger.info("seed_users_inserted", extra={"count": len(users)})

        match_count = self.insert_matches(users, problems)
        logger.info("seed_matches_inserted", extra={"count": match_count})

        summary = {
            "problems": len(problems),
            "users": len(users),
            "matches": match_count,
        }
        logger.info("seed_completed", extra=summary)
        return summary
