# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from guestreports import __version__
from guestreports.api.deps import get_store
from guestreports.api.v1 import pages
from guestreports.api.v1.router import api_router
from guestreports.config import Settings, get_settings
from guestreports.integrations.base import ReportStore
from guestreports.integrations.rest_store import RestReportStore
from guestreports.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; the store client lives for the app's lifespan."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown events."""
        logger.info(f"Connecting to report store at {settings.store_url}")
        app.state.store = RestReportStore(settings.store_url, timeout=settings.store_timeout)

        yield

        logger.info("Closing report store client...")
        await app.state.store.close()

    app = FastAPI(
        title=settings.app_title,
        description="Guest opportunity report tracking",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/health", response_model=HealthResponse)
    async def health_check(store: ReportStore = Depends(get_store)) -> HealthResponse:
        """Health check endpoint."""
        ok, message = await store.health_check()
        return HealthResponse(status="healthy" if ok else "degraded", store=message)

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(pages.router)

    return app


app = create_app()
