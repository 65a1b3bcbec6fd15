"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from content_writer.schemas.generate import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["system"])
def healthcheck() -> HealthResponse:
    """Simple readiness probe."""

    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc).isoformat())
