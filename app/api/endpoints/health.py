"""
Health check endpoints.

Provides a liveness check and a detailed status including database reachability.
"""

import logging
from typing import Dict, Any
from fastapi import APIRouter, Depends, status
from datetime import datetime, timezone

from app.core.database import DatabaseConnectionChecker
from app.core.deps import get_connection_checker

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    Use this for simple uptime monitoring and load balancer health checks.
    """
    return {
        "status": "healthy",
        "timestamp": _timestamp()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(
    checker: DatabaseConnectionChecker = Depends(get_connection_checker)
) -> Dict[str, Any]:
    """
    Detailed health check with dependency status.

    The database check acquires a pooled connection and runs SELECT 1
    within the validation timeout.
    """
    health_status = {
        "status": "healthy",
        "timestamp": _timestamp(),
        "checks": {}
    }

    if checker.is_available():
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful"
        }
    else:
        logger.error("Database health check failed")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": "Database not reachable"
        }

    return health_status
