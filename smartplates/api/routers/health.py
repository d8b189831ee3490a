"""Health check endpoint."""

import logging
import sqlite3

from fastapi import APIRouter

from smartplates import __version__
from smartplates.api.schemas.common import HealthResponse
from smartplates.core.config import SpoonacularConfig
from smartplates.core.database import get_connection

router = APIRouter(prefix="/api", tags=["health"])
_LOGGER = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Check API and database health.

    Status is "healthy" when the database answers, "offline" otherwise.
    """
    database_ok = False
    try:
        with get_connection() as conn:
            conn.execute("SELECT 1")
            database_ok = True
    except sqlite3.Error as e:
        _LOGGER.warning("Database health check failed: %s", e)

    return HealthResponse(
        status="healthy" if database_ok else "offline",
        database_ok=database_ok,
        spoonacular_configured=SpoonacularConfig.is_configured(),
        version=__version__,
    )
