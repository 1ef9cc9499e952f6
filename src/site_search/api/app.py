"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings
from ..utils.logging import setup_logging
from .routers import health, search


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle.

    Opens the search service client on startup and closes it on shutdown.
    """
    setup_logging(settings.log_level)

    client = httpx.AsyncClient(timeout=settings.request_timeout_seconds)
    app.state.http_client = client

    yield

    await client.aclose()


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Site Search API",
        description="Search page rendering on top of an external search service",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(search.page_router, tags=["Pages"])
    app.include_router(search.router, prefix="/api/v1", tags=["Search"])

    return app
