"""Health check endpoints — used by load balancers and uptime monitoring."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from taxchat import __version__
from taxchat.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness probe — returns 200 if the process is running."""
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def ready(settings: Settings = Depends(get_settings)) -> JSONResponse:
    """
    Readiness probe — the relay can only answer chats with a credential.
    Returns 200 with {"completion_api": "configured"}, or 503 with "missing".
    """
    if settings.completion_configured:
        return JSONResponse(content={"completion_api": "configured"}, status_code=200)
    logger.warning("Readiness check: GOOGLE_API_KEY is not set.")
    return JSONResponse(content={"completion_api": "missing"}, status_code=503)
