"""
Health check API endpoints.

Routes: GET /health, GET /health/ping

Dependencies: fastapi
System role: Health check HTTP API
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    """Liveness check."""
    return "pong"
