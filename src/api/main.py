"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance
and wires the registration service during lifespan startup.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.v1 import router as v1_router
from src.config.logging import configure_logging
from src.config.settings import get_settings
from src.manual import build_service

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Sign-up API v1 - Register and confirm identity provider accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Loads settings (refusing to start when required values are missing)
    and wires the registration service into app.state.
    """
    settings = get_settings()
    configure_logging(settings.log_level, log_json=settings.log_json)

    logger.info("Starting application...")
    app.state.registration_service = build_service(settings)
    logger.info("Application startup complete (region %s)", settings.cognito_region)

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="signup-client",
    description="Hosted identity provider sign-up and confirmation API",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
