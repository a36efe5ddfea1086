"""Problem browsing endpoint.

GET /problems?search=&category=&location=&country_code=
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_catalog
from app.core.errors import unwrap
from app.models.problem import ProblemListResponse
from app.services.problems import ProblemCatalog, build_filters

router = APIRouter()


@router.get("/problems", response_model=ProblemListResponse)
def list_problems(
    search: str | None = Query(
        default=None,
        description="Substring of the title or description (case-insensitive)",
    ),
    category: str | None = Query(default=None, description="Exact category"),
    location: str | None = Query(
        default=None,
        description="Substring of the location (case-insensitive)",
    ),
    country_code: str | None = Query(
        default=None,
        description="ISO country code (case-insensitive)",
    ),
    catalog: ProblemCatalog = Depends(get_catalog),
) -> ProblemListResponse:
    """Return up to 200 problems, newest first, with collaborator counts."""
    filters = build_filters(
        search=search,
        category=category,
        location=location,
        country_code=country_code,
    )
    return ProblemListResponse(items=unwrap(catalog.search_problems(filters)))
