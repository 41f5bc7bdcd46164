# main.py

"""
Application entry point for the GitOps Demo status service.

This module initializes the FastAPI application, registers the health
router, and provides the root status endpoint. It can be run directly with
Uvicorn for local development or deployed via ASGI servers in production.
"""

import logging

# Config imports
from config import settings, APP_VERSION

# FASTAPI imports
from fastapi import FastAPI

# APP imports
from app.models.status_model import RootStatus
from app.routers.health import router as health_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Attach a stream handler to the root logger and set its level."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # basicConfig leaves the level alone when the root logger already has handlers
    logging.getLogger().setLevel(level)


configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="GitOps Demo",
    description="Demo application reporting its running status and health.",
    version=APP_VERSION,
)

# Router Registration
app.include_router(health_router)

logger.info("Status service initialized (env=%s)", settings.APP_ENV)


@app.get("/", summary="Application Status", response_model=RootStatus)
@app.head("/", include_in_schema=False)
def home() -> RootStatus:
    """
    Root Endpoint for the API.

    Returns:
        RootStatus: A fixed JSON payload confirming the server is running,
        along with the application version.
    """
    return RootStatus()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
