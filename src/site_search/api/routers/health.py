"""Service status endpoint."""

from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Status of the search page service and the settings it renders with."""

    status: str
    version: str
    checked_at: datetime
    search_service: str = Field(..., description="Search endpoint queried for pages")
    excerpt_mode: str = Field(..., description="'coupled' or 'decoupled' excerpt rendering")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the page service is up and which search service it uses."""
    from ... import __version__

    return HealthResponse(
        status="healthy",
        version=__version__,
        checked_at=datetime.utcnow(),
        search_service=settings.search_service_url,
        excerpt_mode="decoupled" if settings.decouple_excerpt else "coupled",
    )
