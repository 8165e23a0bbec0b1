"""
Health check endpoints.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


@router.get("/")
async def root(request: Request):
    """Root endpoint - API health check"""
    return {
        "message": request.app.title,
        "version": request.app.version,
        "status": "healthy"
    }


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """Basic liveness check for load balancers."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/health/detailed")
def detailed_health_check(request: Request) -> Any:
    """
    Detailed health check with dependency status.

    Returns 503 when the database does not answer.
    """
    state = request.app.state
    database_ok = state.database.ping()

    body = {
        "status": "healthy" if database_ok else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "database": {"status": "healthy" if database_ok else "unhealthy"},
            "storage": {
                "status": "configured" if state.storage else "not_configured",
                "backend": state.storage.name if state.storage else None,
            },
            "email": {
                "status": "configured" if state.email_provider else "not_configured",
                "provider": state.email_provider.name if state.email_provider else None,
            },
        },
    }

    if not database_ok:
        logger.error("Detailed health check: database unreachable")
        return JSONResponse(status_code=503, content=body)
    return body
