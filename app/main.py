# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Qarakal landing site.
# It configures the FastAPI application with middleware, routers, handlers,
# and the startup content fetch.
#
# Usage:
#   uvicorn app.main:app --reload --port 3000
# =============================================================================

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.exceptions import SiteException, site_exception_handler
from app.routers import content, health, pages
from app.templating import STATIC_DIR
from core.services.content_fetcher import ContentFetcher
from core.services.content_store import ContentStore, load_content
from lib.backend_client import create_backend_client
from lib.utils import Liveness

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: create the backend client and start the one content fetch in
      the background, so the page serves static copy until it resolves
    - Shutdown: close the liveness scope (late results are dropped), cancel
      the fetch if still pending, close the client
    """
    logger.info(f"Starting {settings.SITE_NAME} site in {settings.ENVIRONMENT} mode")
    logger.info(f"Content backend: {settings.backend_base_url}")

    client = create_backend_client(timeout=settings.BACKEND_TIMEOUT_SECONDS)
    liveness = Liveness("lifespan")
    store = ContentStore()

    app.state.backend_client = client
    app.state.liveness = liveness
    app.state.content_store = store

    fetcher = ContentFetcher(
        settings.backend_base_url,
        client,
        require_success=settings.CONTENT_REQUIRE_SUCCESS,
    )
    content_task = asyncio.create_task(load_content(fetcher, store, liveness))

    yield

    logger.info(f"Shutting down {settings.SITE_NAME} site")

    liveness.close()
    if not content_task.done():
        content_task.cancel()
    try:
        await content_task
    except asyncio.CancelledError:
        logger.debug("Content fetch cancelled during shutdown")

    await client.aclose()


# Create FastAPI application
app = FastAPI(
    title=f"{settings.SITE_NAME} Site",
    description="Landing page with backend-supplied copy and a contact form.",
    version=health.VERSION,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url=None,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Pages",
            "description": "Server-rendered landing page",
        },
        {
            "name": "Content",
            "description": "Page content, resolved view and contact submission as JSON",
        },
        {
            "name": "Health",
            "description": "Health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(SiteException)
async def handle_site_exception(request: Request, exc: SiteException):
    """Handle custom site exceptions."""
    return await site_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Landing page
app.include_router(
    pages.router,
    tags=["Pages"]
)

# JSON content endpoints
app.include_router(
    content.router,
    prefix="/api/v1",
    tags=["Content"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)
