"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, groups, schools, stats, training

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    schools.router, prefix="/schools", tags=["Schools"]
)
api_router.include_router(
    groups.router, prefix="/groups", tags=["Groups"]
)
api_router.include_router(
    training.router,
    prefix="/training/sessions",
    tags=["Training sessions"],
)
api_router.include_router(
    stats.router, prefix="/stats", tags=["Statistics"]
)
