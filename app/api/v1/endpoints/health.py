"""Liveness and readiness of the tracker: database reachable, exercise catalog seeded."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db
from app.models.exercise import Exercise

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    settings = get_settings()
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Ready once the database answers and the exercise catalog holds at least one exercise."""
    backend = get_settings().database_backend
    try:
        exercises = (await db.execute(select(func.count(Exercise.id)))).scalar() or 0
    except SQLAlchemyError as e:
        logger.exception("Readiness check failed on %s database", backend)
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": backend, "detail": str(e)},
        )
    ready = exercises > 0
    payload = {
        "status": "ok" if ready else "not_ready",
        "database": backend,
        "exercises": exercises,
        "catalog_seeded": ready,
    }
    if not ready:
        return JSONResponse(status_code=503, content=payload)
    return payload
