"""Health domain router.

Health check endpoint for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from aipromote.core.constants import Routes
from aipromote.core.deps import SessionDep, SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])


@router.get("")
def health(session: SessionDep, settings: SettingsDep):
    """Health check endpoint with database connectivity verification."""
    body = {
        "version": settings.app_version,
        "environment": settings.env_name,
    }
    try:
        session.exec(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check database probe failed: %s", e)
        return JSONResponse(
            status_code=503,
            content={"status": "degraded", "database": "disconnected", **body},
        )
    return {"status": "healthy", "database": "connected", **body}
