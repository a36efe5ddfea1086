"""Identity issuer: login tokens and bearer verification.

Tokens are HS256 JWTs carrying ``{"sub": <user id>, "typ": "access"}`` and a
fixed lifetime.  There is no revocation list: a token stays valid until it
expires, whatever happens to the user afterwards.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from supabase import Client

from app.core.config import Settings
from app.core.constants import USER_COLUMNS
from app.core.result import Err, Ok, Result, auth_error, not_found, validation_error
from app.core.validation import is_uuid
from app.db.supabase import execute
from app.models.auth import LoginResponse
from app.models.user import User

logger = logging.getLogger(__name__)

TOKEN_TYPE = "access"

_BEARER_RE = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


class IdentityIssuer:
    """Issues and verifies access tokens for existing users."""

    def __init__(self, client: Client, settings: Settings) -> None:
        self._client = client
        self._secret = settings.JWT_SECRET
        self._algorithm = settings.JWT_ALGORITHM
        self._ttl = timedelta(days=settings.TOKEN_TTL_DAYS)

    def get_identity(self, user_id: str) -> Result[User]:
        """Fetch a single user by id."""
        result = execute(
            self._client.table("users")
            .select(USER_COLUMNS)
            .eq("id", user_id)
            .limit(1),
            "get_identity",
        )
        if isinstance(result, Err):
            return result
        if not result.value:
            return not_found("User not found")
        return Ok(User(**result.value[0]))

    def issue_token(self, user_id: Any, now: datetime | None = None) -> Result[LoginResponse]:
        """Sign a token for ``user_id`` if that user exists."""
        if not is_uuid(user_id):
            return validation_error("userId must be a uuid")

        found = self.get_identity(user_id)
        if isinstance(found, Err):
            return found

        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "typ": TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)

        logger.info("token_issued", extra={"user_id": user_id})
        return Ok(LoginResponse(token=token, user=found.value))

    def verify_token(self, authorization: str | None) -> Result[str]:
        """Validate an ``Authorization`` header and return the token's user id."""
        match = _BEARER_RE.match(authorization or "")
        if match is None:
            return auth_error("Missing Authorization: Bearer <token>")

        try:
            payload = jwt.decode(
                match.group(1).strip(),
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError as exc:
            logger.info("token_rejected", extra={"reason": type(exc).__name__})
            return auth_error("Invalid or expired token")

        subject = payload.get("sub")
        if not is_uuid(subject):
            return auth_error("Invalid token payload")
        return Ok(subject)
