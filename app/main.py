"""FastAPI application entry point.

Configures CORS, structured logging, request logging, error handlers,
lifespan events (Supabase client and services), and router registration.
"""

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging import setup_logging
from app.db.supabase import create_supabase
from app.routers import auth, health, matches, problems, users
from app.services.directory import DirectoryService
from app.services.identity import IdentityIssuer
from app.services.matches import MatchLedger
from app.services.problems import ProblemCatalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: build the store client and the services once."""
    setup_logging()
    client = create_supabase(settings)

    application.state.identity_issuer = IdentityIssuer(client, settings)
    application.state.directory = DirectoryService(client)
    application.state.catalog = ProblemCatalog(client)
    application.state.ledger = MatchLedger(client)

    logger.info("Application starting up")
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Problem Match API",
    description="Match users to problems as solvers or affected people",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Request logging
# ---------------------------------------------------------------------------
@app.middleware("http")
async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            status_code,
            (time.perf_counter() - started) * 1000,
        )


register_error_handlers(app)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, tags=["Auth"])
app.include_router(users.router, tags=["Users"])
app.include_router(problems.router, tags=["Problems"])
app.include_router(matches.router, tags=["Matches"])
