"""Shared outbound HTTP client factory."""

import httpx

from config import settings


def get_client() -> httpx.AsyncClient:
    """New async client with the service-wide timeout. Use as a context manager."""
    return httpx.AsyncClient(timeout=settings.http_timeout_seconds, follow_redirects=True)
