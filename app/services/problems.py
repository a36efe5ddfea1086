"""Problem catalogue: filtered listing with collaborator counts.

Filters are combined with AND.  ``search`` is a case-insensitive substring
match against the title OR the description; ``location`` is a
case-insensitive substring match; ``category`` and ``country_code`` must
match exactly.
"""

from __future__ import annotations

import logging
from typing import Any

from supabase import Client

from app.core.constants import PROBLEM_COLUMNS, PROBLEMS_LIST_LIMIT
from app.core.result import Err, Ok, Result
from app.core.validation import clean_filter
from app.db.supabase import execute
from app.models.problem import ProblemFilters, ProblemListItem

logger = logging.getLogger(__name__)


def build_filters(
    search: str | None = None,
    category: str | None = None,
    location: str | None = None,
    country_code: str | None = None,
) -> ProblemFilters:
    """Normalize raw query-string values into ``ProblemFilters``."""
    return ProblemFilters(
        search=clean_filter(search),
        category=clean_filter(category),
        location=clean_filter(location),
        country_code=clean_filter(country_code).upper(),
    )


def _quote(value: str) -> str:
    """Quote a value for use inside a PostgREST ``or=(...)`` expression."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _collaborator_count(row: dict[str, Any]) -> int:
    # PostgREST returns an embedded aggregate as ``[{"count": n}]``
    embedded = row.get("problem_matches") or []
    if not embedded:
        return 0
    return int(embedded[0].get("count") or 0)


class ProblemCatalog:
    def __init__(self, client: Client) -> None:
        self._client = client

    def search_problems(self, filters: ProblemFilters) -> Result[list[ProblemListItem]]:
        """Return matching problems, newest first, with collaborator counts."""
        query = (
            self._client.table("problems")
            .select(f"{PROBLEM_COLUMNS}, problem_matches(count)")
            .order("created_at", desc=True)
            .limit(PROBLEMS_LIST_LIMIT)
        )

        if filters.category:
            query = query.eq("category", filters.category)
        if filters.country_code:
            query = query.eq("country_code", filters.country_code)
        if filters.location:
            query = query.ilike("location", f"%{filters.location}%")
        if filters.search:
            pattern = _quote(f"%{filters.search}%")
            query = query.or_(f"title.ilike.{pattern},description.ilike.{pattern}")

        result = execute(query, "search_problems")
        if isinstance(result, Err):
            return result

        items = [
            ProblemListItem(
                **{k: v for k, v in row.items() if k != "problem_matches"},
                collaborator_count=_collaborator_count(row),
            )
            for row in result.value
        ]
        logger.debug(
            "problems_searched",
            extra={"filters": filters.model_dump(), "returned": len(items)},
        )
        return Ok(items)
