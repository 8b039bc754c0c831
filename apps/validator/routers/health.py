"""Health check router.

Handles the liveness check for service monitoring.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from apps.validator.constants import SERVICE_NAME

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    ok: bool
    service: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(ok=True, service=SERVICE_NAME)
