"""Common API schemas used across endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    database_ok: bool
    spoonacular_configured: bool = False
    version: str
