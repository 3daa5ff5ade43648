"""Workout session endpoints: preview, start, log sets, finish, cancel, last time."""

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.notify import notify_state_changed
from app.core.enums import StateChangeKind
from app.db.session import get_db
from app.schemas.history import LastTimeRead
from app.schemas.program import ProgramRead, WorkoutDef
from app.schemas.workout import (
    LastCompletedWorkoutRead,
    WorkoutPreviewRead,
    WorkoutSessionCreate,
    WorkoutSessionRead,
    WorkoutSetCreate,
    WorkoutSetRead,
)
from app.services import history, session_manager

router = APIRouter()


@router.get("/active", response_model=WorkoutSessionRead | None)
async def get_active_session(db: AsyncSession = Depends(get_db)):
    """The session in progress, or null."""
    return await session_manager.get_active_session(db)


@router.get("/preview", response_model=WorkoutPreviewRead)
async def get_workout_preview(db: AsyncSession = Depends(get_db)):
    """Active program and today's workout day; workout is null for an unconfigured slot."""
    preview = await session_manager.preview(db)
    return WorkoutPreviewRead(
        program=ProgramRead.model_validate(preview.program) if preview.program else None,
        workout_number=preview.workout_number,
        workout=WorkoutDef.model_validate(preview.workout) if preview.workout else None,
        active_session=(
            WorkoutSessionRead.model_validate(preview.active_session) if preview.active_session else None
        ),
    )


@router.get("/last-completed", response_model=LastCompletedWorkoutRead | None)
async def get_last_completed_workout(
    program_id: int,
    workout_number: int,
    db: AsyncSession = Depends(get_db),
):
    """Most recent completed session for this program's workout day, with its sets."""
    last = await history.last_completed_workout(db, program_id, workout_number)
    if last is None:
        return None
    session, sets = last
    return LastCompletedWorkoutRead(
        session=WorkoutSessionRead.model_validate(session),
        sets=[WorkoutSetRead.model_validate(s) for s in sets],
    )


@router.get("/last-time", response_model=LastTimeRead | None)
async def get_last_time(
    program_id: int,
    workout_number: int,
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Last-time summary for one exercise, shown while logging the current session."""
    last = await history.last_time_for(db, program_id, workout_number, exercise_id)
    if last is None:
        return None
    session, sets = last
    return LastTimeRead(
        session_id=session.id,
        date=session.date,
        sets=[WorkoutSetRead.model_validate(s) for s in sets],
        summary=history.format_performance(sets),
    )


@router.post("", response_model=WorkoutSessionRead, status_code=201)
async def start_workout(
    payload: WorkoutSessionCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Start the program's current workout day. 409 if a session is already in progress."""
    session = await session_manager.start(db, payload.program_id)
    notify_state_changed(background_tasks, StateChangeKind.SESSION)
    return session


@router.get("/{session_id}", response_model=WorkoutSessionRead)
async def get_session(session_id: int, db: AsyncSession = Depends(get_db)):
    return await session_manager.get_session(db, session_id)


@router.get("/{session_id}/sets", response_model=list[WorkoutSetRead])
async def list_session_sets(session_id: int, db: AsyncSession = Depends(get_db)):
    """Sets of the session in logging order."""
    await session_manager.get_session(db, session_id)
    return await session_manager.sets_for_session(db, session_id)


@router.post("/{session_id}/sets", response_model=WorkoutSetRead, status_code=201)
async def log_set(
    session_id: int,
    payload: WorkoutSetCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Log a set (weight > 0, reps > 0)."""
    set_ = await session_manager.log_set(db, session_id, payload.exercise_id, payload.weight, payload.reps)
    notify_state_changed(background_tasks, StateChangeKind.SETS)
    return set_


@router.post("/{session_id}/finish", response_model=WorkoutSessionRead)
async def finish_workout(
    session_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Complete the session and move the program on to its next workout day."""
    session = await session_manager.finish(db, session_id)
    notify_state_changed(background_tasks, StateChangeKind.SESSION)
    return session


@router.delete("/{session_id}", status_code=204)
async def cancel_workout(
    session_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Cancel the session: it and all its sets are deleted."""
    await session_manager.cancel(db, session_id)
    notify_state_changed(background_tasks, StateChangeKind.SESSION)
    return None
