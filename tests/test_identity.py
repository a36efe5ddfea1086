"""Tests for the identity issuer and the /login and /me endpoints."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import jwt
import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from conftest import (
    MISSING_ID,
    TEST_JWT_SECRET,
    USER_ID,
    chainable_table_mock,
    user_row,
)


def _issuer(mock_supabase: MagicMock):
    from app.core.config import settings
    from app.services.identity import IdentityIssuer

    return IdentityIssuer(mock_supabase, settings)


# ---------------------------------------------------------------------------
# UUID shape
# ---------------------------------------------------------------------------


class TestIsUuid:
    @pytest.mark.parametrize(
        "value",
        [
            USER_ID,
            USER_ID.upper(),
            "123e4567-e89b-12d3-a456-426614174000",
            "6ba7b810-9dad-51d1-80b4-00c04fd430c8",
        ],
    )
    def test_accepts_versions_one_to_five(self, value: str) -> None:
        from app.core.validation import is_uuid

        assert is_uuid(value)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            42,
            "",
            "not-a-uuid",
            "00000000-0000-0000-0000-000000000000",
            "123e4567-e89b-62d3-a456-426614174000",  # version 6
            "123e4567-e89b-42d3-c456-426614174000",  # variant c
            "123e4567e89b42d3a456426614174000",
            f" {USER_ID}",
        ],
    )
    def test_rejects_other_shapes(self, value: object) -> None:
        from app.core.validation import is_uuid

        assert not is_uuid(value)


# ---------------------------------------------------------------------------
# issue_token
# ---------------------------------------------------------------------------


class TestIssueToken:
    def test_invalid_uuid_is_validation_error(self, mock_supabase: MagicMock) -> None:
        from app.core.result import Err
        from app.models.enums import ErrorKind

        result = _issuer(mock_supabase).issue_token("abc")

        assert isinstance(result, Err)
        assert result.kind is ErrorKind.validation
        mock_supabase.table.assert_not_called()

    def test_unknown_user_is_not_found(self, mock_supabase: MagicMock) -> None:
        from app.core.result import Err
        from app.models.enums import ErrorKind

        mock_supabase.tables["users"] = chainable_table_mock([])

        result = _issuer(mock_supabase).issue_token(MISSING_ID)

        assert isinstance(result, Err)
        assert result.kind is ErrorKind.not_found

    def test_token_binds_subject_and_expires_in_thirty_days(
        self, mock_supabase: MagicMock
    ) -> None:
        from app.core.result import Ok

        mock_supabase.tables["users"] = chainable_table_mock([user_row()])
        now = datetime.now(timezone.utc).replace(microsecond=0)

        result = _issuer(mock_supabase).issue_token(USER_ID, now=now)

        assert isinstance(result, Ok)
        assert str(result.value.user.id) == USER_ID
        payload = jwt.decode(result.value.token, TEST_JWT_SECRET, algorithms=["HS256"])
        assert payload["sub"] == USER_ID
        assert payload["typ"] == "access"
        assert payload["exp"] - payload["iat"] == int(timedelta(days=30).total_seconds())
        mock_supabase.tables["users"].eq.assert_called_with("id", USER_ID)

    def test_store_failure_is_store_error(self, mock_supabase: MagicMock) -> None:
        from app.core.result import Err
        from app.models.enums import ErrorKind

        table = chainable_table_mock()
        table.execute.side_effect = APIError({"message": "permission denied"})
        mock_supabase.tables["users"] = table

        result = _issuer(mock_supabase).issue_token(USER_ID)

        assert isinstance(result, Err)
        assert result.kind is ErrorKind.store
        assert result.message == "permission denied"


# ---------------------------------------------------------------------------
# verify_token
# ---------------------------------------------------------------------------


class TestVerifyToken:
    def test_valid_token_yields_subject(
        self, mock_supabase: MagicMock, make_token: Callable[..., str]
    ) -> None:
        from app.core.result import Ok

        result = _issuer(mock_supabase).verify_token(f"Bearer {make_token()}")

        assert result == Ok(USER_ID)

    def test_scheme_is_case_insensitive(
        self, mock_supabase: MagicMock, make_token: Callable[..., str]
    ) -> None:
        from app.core.result import Ok

        result = _issuer(mock_supabase).verify_token(f"bearer   {make_token()}")

        assert result == Ok(USER_ID)

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Token abc", "Basic dXNlcjpwYXNz"])
    def test_missing_or_malformed_header(
        self, mock_supabase: MagicMock, header: str | None
    ) -> None:
        from app.core.result import Err
        from app.models.enums import ErrorKind

        result = _issuer(mock_supabase).verify_token(header)

        assert isinstance(result, Err)
        assert result.kind is ErrorKind.auth

    def test_tampered_signature(
        self, mock_supabase: MagicMock, make_token: Callable[..., str]
    ) -> None:
        from app.core.result import Err

        token = make_token()
        head, body, signature = token.split(".")
        forged = f"{head}.{body}.{signature[:-4]}AAAA"

        result = _issuer(mock_supabase).verify_token(f"Bearer {forged}")

        assert isinstance(result, Err)
        assert result.message == "Invalid or expired token"

    def test_wrong_secret(
        self, mock_supabase: MagicMock, make_token: Callable[..., str]
    ) -> None:
        from app.core.result import Err

        token = make_token(secret="another-secret-that-is-long-enough-for-hs256")

        assert isinstance(_issuer(mock_supabase).verify_token(f"Bearer {token}"), Err)

    def test_expired_token(
        self, mock_supabase: MagicMock, make_token: Callable[..., str]
    ) -> None:
        from app.core.result import Err

        token = make_token(expires_in=timedelta(seconds=-60))

        result = _issuer(mock_supabase).verify_token(f"Bearer {token}")

        assert isinstance(result, Err)
        assert result.message == "Invalid or expired token"

    def test_subject_must_be_uuid(
        self, mock_supabase: MagicMock, make_token: Callable[..., str]
    ) -> None:
        from app.core.result import Err

        token = make_token(sub="admin")

        result = _issuer(mock_supabase).verify_token(f"Bearer {token}")

        assert isinstance(result, Err)
        assert result.message == "Invalid token payload"

    def test_missing_expiry_is_rejected(self, mock_supabase: MagicMock) -> None:
        from app.core.result import Err

        token = jwt.encode({"sub": USER_ID, "typ": "access"}, TEST_JWT_SECRET, algorithm="HS256")

        assert isinstance(_issuer(mock_supabase).verify_token(f"Bearer {token}"), Err)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


class TestLoginEndpoint:
    @pytest.mark.parametrize("user_id", ["abc", "1234", "00000000-0000-0000-0000-000000000000"])
    def test_invalid_uuid_returns_400(self, test_client: TestClient, user_id: str) -> None:
        response = test_client.post("/login", json={"userId": user_id})

        assert response.status_code == 400
        assert response.json() == {"error": "userId must be a uuid"}

    @pytest.mark.parametrize("body", [{}, {"userId": 12}, {"userId": None}])
    def test_missing_or_non_string_user_id_returns_400(
        self, test_client: TestClient, body: dict
    ) -> None:
        response = test_client.post("/login", json=body)

        assert response.status_code == 400
        assert "error" in response.json()

    def test_unknown_user_returns_404(
        self, test_client: TestClient, mock_supabase: MagicMock
    ) -> None:
        mock_supabase.tables["users"] = chainable_table_mock([])

        response = test_client.post("/login", json={"userId": MISSING_ID})

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_store_failure_returns_500_with_store_message(
        self, test_client: TestClient, mock_supabase: MagicMock
    ) -> None:
        table = chainable_table_mock()
        table.execute.side_effect = APIError({"message": "connection reset"})
        mock_supabase.tables["users"] = table

        response = test_client.post("/login", json={"userId": USER_ID})

        assert response.status_code == 500
        assert response.json() == {"error": "connection reset"}

    def test_login_then_me_round_trip(
        self, test_client: TestClient, mock_supabase: MagicMock
    ) -> None:
        mock_supabase.tables["users"] = chainable_table_mock([user_row()])

        login = test_client.post("/login", json={"userId": USER_ID})
        assert login.status_code == 200
        body = login.json()
        assert body["user"]["id"] == USER_ID
        assert body["user"]["display_name"] == "Alex 01"

        me = test_client.get("/me", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.status_code == 200
        assert me.json()["user"]["id"] == USER_ID


class TestMeEndpoint:
    def test_without_token_returns_401(self, test_client: TestClient) -> None:
        response = test_client.get("/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Missing Authorization: Bearer <token>"}

    def test_expired_token_returns_401(
        self, test_client: TestClient, make_token: Callable[..., str]
    ) -> None:
        token = make_token(expires_in=timedelta(minutes=-5))

        response = test_client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_deleted_user_returns_404(
        self,
        test_client: TestClient,
        mock_supabase: MagicMock,
        auth_headers: dict[str, str],
    ) -> None:
        mock_supabase.tables["users"] = chainable_table_mock([])

        response = test_client.get("/me", headers=auth_headers)

        assert response.status_code == 404


class TestUsersEndpoint:
    def test_lists_users_newest_first_with_cap(
        self, test_client: TestClient, mock_supabase: MagicMock
    ) -> None:
        table = chainable_table_mock([user_row(), user_row(MISSING_ID, "Sam 02")])
        mock_supabase.tables["users"] = table

        response = test_client.get("/users")

        assert response.status_code == 200
        items = response.json()["items"]
        assert [i["id"] for i in items] == [USER_ID, MISSING_ID]
        table.order.assert_called_once_with("created_at", desc=True)
        table.limit.assert_called_once_with(500)
