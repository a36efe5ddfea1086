"""Shared test fixtures.

Primes the environment required by ``app.core.config`` before anything from
the application is imported, and provides a chainable mock Supabase client,
a FastAPI ``TestClient`` wired to that mock, and token helpers.
"""

import os
from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import MagicMock, patch

import jwt
import pytest
from fastapi.testclient import TestClient

TEST_JWT_SECRET = "test-jwt-secret-0123456789abcdef-0123456789"

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ["JWT_SECRET"] = TEST_JWT_SECRET

# Build the frozen module-level settings from the values above before any
# test patches the environment.
from app.core.config import settings  # noqa: E402

USER_ID = "3f1c2b9a-6d4e-4f8a-9b2c-1a2b3c4d5e6f"
OTHER_USER_ID = "7a8b9c0d-1e2f-4a3b-8c4d-5e6f7a8b9c0d"
PROBLEM_ID = "c0ffee00-1234-4abc-9def-0123456789ab"
MISSING_ID = "11111111-2222-4333-8444-555555555555"


def chainable_table_mock(data: list[dict[str, Any]] | None = None) -> MagicMock:
    """Return a query-builder mock whose filters chain and whose
    ``execute()`` yields ``data``."""
    m = MagicMock()
    for method in (
        "select", "insert", "upsert", "update", "delete", "eq", "neq",
        "ilike", "or_", "order", "limit",
    ):
        getattr(m, method).return_value = m
    m.execute.return_value = MagicMock(data=data if data is not None else [])
    return m


def user_row(user_id: str = USER_ID, name: str = "Alex 01") -> dict[str, Any]:
    return {
        "id": user_id,
        "display_name": name,
        "created_at": "2025-01-10T12:00:00+00:00",
    }


def problem_row(problem_id: str = PROBLEM_ID, **overrides: Any) -> dict[str, Any]:
    row = {
        "id": problem_id,
        "title": "Food waste in cities",
        "description": "Redistribute surplus edible food from shops to communities.",
        "category": "Sustainability",
        "location": "Paris, FR",
        "country_code": "FR",
        "created_at": "2025-01-01T09:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture()
def mock_supabase() -> MagicMock:
    """Mock Supabase client dispatching ``table(name)`` to ``client.tables``.

    Tests assign ``mock_supabase.tables["users"] = chainable_table_mock(...)``;
    unknown tables get an empty chainable mock on first use.
    """
    client = MagicMock()
    client.tables = {}

    def table_dispatch(name: str) -> MagicMock:
        if name not in client.tables:
            client.tables[name] = chainable_table_mock()
        return client.tables[name]

    client.table.side_effect = table_dispatch
    return client


@pytest.fixture()
def test_client(mock_supabase: MagicMock) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient whose services use ``mock_supabase``."""
    from app.main import app

    with patch("app.main.create_supabase", return_value=mock_supabase):
        with TestClient(app) as client:
            yield client


@pytest.fixture()
def make_token() -> Callable[..., str]:
    """Build a token the way the identity service signs them."""

    def _make(
        sub: Any = USER_ID,
        expires_in: timedelta = timedelta(days=30),
        secret: str | None = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        payload = {"sub": sub, "typ": "access", "iat": now, "exp": now + expires_in}
        return jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)

    return _make


@pytest.fixture()
def auth_headers(make_token: Callable[..., str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}
