"""Main FastAPI application entry point."""

import logging
import os

# Configure logging BEFORE importing any app modules that create loggers
# Get config from environment variables directly to avoid circular import
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH")

handlers = [logging.StreamHandler()]  # Always log to stdout

if LOG_FILE_PATH:
    handlers.append(logging.FileHandler(LOG_FILE_PATH, mode="a"))

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=handlers,
    force=True,
)

logger = logging.getLogger(__name__)
logger.info(f"Logging configured: level={LOG_LEVEL}, file={LOG_FILE_PATH or 'stdout only'}")

# Now import everything else after logging is configured
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from waitlist_dashboard.config import settings
from waitlist_dashboard.routers.api import waitlist as api_waitlist
from waitlist_dashboard.routers.web.views import router as web_router
from waitlist_dashboard.services.waitlist_controller import build_controller


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting {settings.app_name} against {settings.waitlist_api_url}")
    controller = build_controller()
    app.state.waitlist_controller = controller

    if settings.fetch_on_startup:
        # Failures are recorded in the controller state, never raised
        await controller.mount()
    else:
        logger.info("Startup fetch disabled; waiting for the first dashboard view")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch and log all unhandled exceptions."""
    logger.exception(
        f"Unhandled exception occurred: {exc!r}\n"
        f"Request: {request.method} {request.url}\n"
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error occurred. Check logs for details."},
    )


app.include_router(api_waitlist.router)
app.include_router(web_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version, "app_name": settings.app_name}
