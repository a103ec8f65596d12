import asyncio
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from items_svc.core.config import get_settings
from items_svc.db import session

router = APIRouter()
LOG = logging.getLogger(__name__)
settings = get_settings()


@router.get("/health", tags=["health"])
async def health() -> JSONResponse:
    """Liveness check that round-trips to the database."""
    try:
        await asyncio.wait_for(session.ping_database(), timeout=settings.HEALTHCHECK_TIMEOUT)
    except Exception as exc:
        LOG.warning("health check failed err=%r", exc)
        return JSONResponse(
            {"status": "unhealthy", "error": str(exc) or "An unknown error occurred"},
            status_code=500,
        )
    return JSONResponse({"status": "healthy"})
