"""Health check and API index endpoints."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from royale_decks.core.version import APP_VERSION

router = APIRouter()


class HealthResponse(BaseModel):
    """Schema returned by the /health endpoint."""

    status: Literal["ok"]
    timestamp: datetime
    uptime: float = Field(..., description="Seconds since application startup.")
    version: str = Field(default=APP_VERSION)


class IndexResponse(BaseModel):
    message: str
    endpoints: dict[str, str]


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    tags=["health"],
)
async def health(request: Request) -> HealthResponse:
    started_at: float = request.app.state.started_at
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(tz=timezone.utc),
        uptime=round(time.monotonic() - started_at, 3),
        version=APP_VERSION,
    )


@router.get("/", response_model=IndexResponse, summary="API index", include_in_schema=False)
async def index(request: Request) -> IndexResponse:
    return IndexResponse(
        message="DeckBuilder API",
        endpoints={"health": "/health", "api": request.app.state.settings.api_prefix},
    )


__all__ = ["router"]
