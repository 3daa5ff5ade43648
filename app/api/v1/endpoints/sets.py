"""Edit and delete logged sets."""

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.notify import notify_state_changed
from app.core.enums import StateChangeKind
from app.db.session import get_db
from app.schemas.workout import WorkoutSetRead, WorkoutSetUpdate
from app.services import session_manager

router = APIRouter()


@router.patch("/{set_id}", response_model=WorkoutSetRead)
async def update_set(
    set_id: int,
    payload: WorkoutSetUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Update weight and reps in place (position and timestamp unchanged)."""
    set_ = await session_manager.edit_set(db, set_id, payload.weight, payload.reps)
    notify_state_changed(background_tasks, StateChangeKind.SETS)
    return set_


@router.delete("/{set_id}", status_code=204)
async def delete_set(
    set_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    await session_manager.delete_set(db, set_id)
    notify_state_changed(background_tasks, StateChangeKind.SETS)
    return None
