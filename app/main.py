"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.core.middleware import GeoRestrictionMiddleware, RequestLoggingMiddleware

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Students log daily exercise; teachers follow their groups.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

app.add_middleware(RequestLoggingMiddleware)
if settings.GEO_RESTRICTION_ENABLED:
    app.add_middleware(GeoRestrictionMiddleware, allowed_countries=settings.ALLOWED_COUNTRIES)
    logger.info("Geo restriction enabled", extra={ "allowed_countries": settings.ALLOWED_COUNTRIES })

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "SchoolFit API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "schoolfit-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "project url": settings.PROJECT_URL
    }
