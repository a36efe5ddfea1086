"""Supabase client factory.

``create_supabase()`` builds a service-role client from explicit settings.
The application creates exactly one client during startup and hands it to
each service; nothing else in the process holds a client.
"""

from __future__ import annotations

import logging
from typing import Any

from postgrest.exceptions import APIError
from supabase import Client, ClientOptions, create_client

from app.core.config import Settings
from app.core.result import Ok, Result, store_error

logger = logging.getLogger(__name__)


def create_supabase(settings: Settings) -> Client:
    """Return a new Supabase client authenticated with the service-role key."""
    return create_client(
        settings.SUPABASE_URL,
        settings.SUPABASE_SERVICE_ROLE_KEY,
        options=ClientOptions(persist_session=False, auto_refresh_token=False),
    )


def execute(query: Any, operation: str) -> Result[list[dict[str, Any]]]:
    """Run a PostgREST query builder and wrap its rows in a ``Result``.

    Store failures are logged and returned as ``Err(store)`` carrying the
    store's own message.
    """
    try:
        response = query.execute()
    except APIError as exc:
        message = exc.message or str(exc)
        logger.error(
            "store_query_failed",
            extra={"operation": operation, "error_message": message},
        )
        return store_error(message)
    return Ok(response.data or [])
