"""Health, readiness and cache introspection routes."""

import logging

from fastapi import APIRouter

from config import settings
from services.cache import cache

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": "congress-lookup", "commit": settings.git_sha}


@router.get("/health")
async def health() -> dict:
    """Service status plus which optional data sources have API keys."""
    return {
        "status": "OK",
        "message": "Congress lookup is running",
        "service": "congress-lookup",
        "commit": settings.git_sha,
        "apis": settings.api_status(),
    }


@router.get("/api/cache/status")
async def cache_status() -> dict:
    return cache.status()


@router.post("/api/cache/clear")
async def clear_cache() -> dict:
    """Drop all cached responses so the next request refetches."""
    removed = cache.clear()
    logger.info("Cache cleared (%d entries)", removed)
    return {"message": "Cache cleared successfully", "removed": removed}
