"""Liveness endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, bool]:
    """Return ``{"ok": true}`` while the process is serving requests."""
    return {"ok": True}
