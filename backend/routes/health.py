"""Health and readiness check routes."""

import logging

from fastapi import APIRouter, Request

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ready")
async def ready(request: Request) -> dict:
    """Lightweight readiness check."""
    settings = request.app.state.settings
    return {"status": "ok", "service": "user-directory-api", "commit": settings.git_sha}


@router.get("/health")
async def health(request: Request) -> dict:
    """Readiness plus store and cache sizes."""
    state = request.app.state
    return {
        "status": "ok",
        "service": "user-directory-api",
        "commit": state.settings.git_sha,
        "users": state.user_service.count(),
        "cache_entries": len(state.cache),
    }
