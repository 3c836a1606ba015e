"""
Campus Data Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancer probes.
Why:   Orchestrators need to know whether this instance can serve traffic.
       The only critical dependency is the relational store.
How:   Runs SELECT 1 on a request-scoped session and reports the result.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Database reachable
    - unhealthy: Database unreachable (route traffic elsewhere)
"""

import logging
import time

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata import __version__
from campusdata.database import get_db_session
from campusdata.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: set once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports whether the service and its database are operational.",
)
async def health_check(db: AsyncSession = Depends(get_db_session)) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
