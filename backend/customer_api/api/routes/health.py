"""Health endpoints — is the process alive, and can it reach its database.

Invariants:
    - GET /health/ answers 200 while the process serves requests; it never
      touches the database
    - GET /health/ready answers 503 until init_db has run and the engine
      accepts a trivial query

Design Decisions:
    - db_manager is looked up on the module per request: it is created in
      the lifespan, after this router is imported
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from customer_api.config import get_settings
import customer_api.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "customer-api"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": get_settings().api_version,
    }


@router.get("/ready")
async def readiness_check():
    """503 with a reason while the database is unreachable."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Not ready: customer database unreachable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
