"""Welcome and health check endpoints: no authentication required."""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from presentation.api.dependencies import get_container
from presentation.api.schemas.system import HealthResponse
from shared.container import Container

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health"])

# Track startup time for uptime calculation
_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def welcome():
    requested_at = datetime.now(timezone.utc).isoformat()
    return f"Welcome to my app! Requested at: {requested_at}"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Reports whether the store is reachable. No authentication required.",
)
async def health_check(container: Container = Depends(get_container)) -> HealthResponse:
    db_ok = await container.user_repository().ping()

    return HealthResponse(
        status="ok" if db_ok else "degraded",
        database_ok=db_ok,
        uptime_seconds=round(time.time() - _start_time, 1),
    )
