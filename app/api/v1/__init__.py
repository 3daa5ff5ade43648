"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    data,
    exercises,
    health,
    programs,
    sessions,
    sets,
    state,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(programs.router, prefix="/programs", tags=["programs"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(sets.router, prefix="/sets", tags=["sets"])
api_router.include_router(data.router, prefix="/data", tags=["data"])
api_router.include_router(state.router, prefix="/state", tags=["state"])
