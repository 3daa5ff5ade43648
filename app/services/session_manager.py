"""Session manager: lifecycle of the in-progress workout.

NoSession -> Previewing -> Logging -> Completed | Cancelled. Only one
incomplete session may exist across the whole store.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import MAX_WEIGHT
from app.core.exceptions import ConstraintError, EmptyWorkoutError, NotFoundError, ValidationError
from app.models.exercise import Exercise
from app.models.program import Program
from app.models.workout import WorkoutSession, WorkoutSet
from app.services import scheduler
from app.services.program_store import get_active_program, get_program

logger = logging.getLogger(__name__)


@dataclass
class WorkoutPreview:
    program: Program | None = None
    workout_number: int | None = None
    workout: dict | None = None
    active_session: WorkoutSession | None = None


def validate_performance(weight, reps) -> tuple[float, int]:
    """Weight must be a positive number below MAX_WEIGHT (two decimals kept), reps a positive whole number."""
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise ValidationError("Please enter valid weight and reps")
    if isinstance(reps, bool) or not isinstance(reps, Real):
        raise ValidationError("Please enter valid weight and reps")
    weight = float(weight)
    if not math.isfinite(weight):
        raise ValidationError("Please enter valid weight and reps")
    weight = round(weight, 2)
    if weight <= 0 or weight >= MAX_WEIGHT:
        raise ValidationError("Please enter valid weight and reps")
    if not isinstance(reps, Integral) and not float(reps).is_integer():
        raise ValidationError("Please enter valid weight and reps")
    reps = int(reps)
    if reps <= 0:
        raise ValidationError("Please enter valid weight and reps")
    return weight, reps


async def get_active_session(db: AsyncSession) -> WorkoutSession | None:
    result = await db.execute(select(WorkoutSession).where(WorkoutSession.is_complete.is_(False)))
    return result.scalars().first()


async def get_session(db: AsyncSession, session_id: int) -> WorkoutSession:
    session = await db.get(WorkoutSession, session_id)
    if session is None:
        raise NotFoundError("Workout session not found")
    return session


async def preview(db: AsyncSession) -> WorkoutPreview:
    """Active program with its current workout day; workout stays None for an empty slot."""
    program = await get_active_program(db)
    active_session = await get_active_session(db)
    if program is None:
        return WorkoutPreview(active_session=active_session)
    workout_number = program.current_workout or 1
    return WorkoutPreview(
        program=program,
        workout_number=workout_number,
        workout=program.workout_def(workout_number),
        active_session=active_session,
    )


async def start(db: AsyncSession, program_id: int) -> WorkoutSession:
    """Open a session for the program's current workout day."""
    existing = await get_active_session(db)
    if existing is not None:
        raise ConstraintError(f"Workout session {existing.id} is already in progress")

    program = await get_program(db, program_id)
    workout_number = program.current_workout or 1
    if program.workout_def(workout_number) is None:
        raise EmptyWorkoutError(f"No exercises configured for Workout {workout_number}")

    session = WorkoutSession(program_id=program.id, workout_number=workout_number, is_complete=False)
    db.add(session)
    await db.flush()
    await db.refresh(session)
    logger.info("Started session %s: program %s workout %s", session.id, program.id, workout_number)
    return session


async def _open_session(db: AsyncSession, session_id: int) -> WorkoutSession:
    session = await get_session(db, session_id)
    if session.is_complete:
        raise ConstraintError("Workout session is already complete")
    return session


async def log_set(db: AsyncSession, session_id: int, exercise_id: int, weight, reps) -> WorkoutSet:
    """Record one set. No cap on sets per exercise; target sets are advisory."""
    weight, reps = validate_performance(weight, reps)
    session = await _open_session(db, session_id)
    if await db.get(Exercise, exercise_id) is None:
        raise ValidationError(f"Unknown exercise id: {exercise_id}")

    set_ = WorkoutSet(
        workout_session_id=session.id,
        exercise_id=exercise_id,
        weight=weight,
        reps=reps,
    )
    db.add(set_)
    await db.flush()
    await db.refresh(set_)
    logger.info("Session %s: logged %skg x %s for exercise %s", session.id, weight, reps, exercise_id)
    return set_


async def get_set(db: AsyncSession, set_id: int) -> WorkoutSet:
    set_ = await db.get(WorkoutSet, set_id)
    if set_ is None:
        raise NotFoundError("Set not found")
    return set_


async def edit_set(db: AsyncSession, set_id: int, weight, reps) -> WorkoutSet:
    """Change weight/reps in place; id, position and original timestamp are kept."""
    weight, reps = validate_performance(weight, reps)
    set_ = await get_set(db, set_id)
    set_.weight = weight
    set_.reps = reps
    await db.flush()
    logger.info("Edited set %s to %skg x %s", set_id, weight, reps)
    return set_


async def delete_set(db: AsyncSession, set_id: int) -> None:
    set_ = await get_set(db, set_id)
    await db.delete(set_)
    await db.flush()
    logger.info("Deleted set %s from session %s", set_id, set_.workout_session_id)


async def sets_for_session(db: AsyncSession, session_id: int) -> list[WorkoutSet]:
    """Sets of a session in logging order."""
    result = await db.execute(
        select(WorkoutSet)
        .where(WorkoutSet.workout_session_id == session_id)
        .order_by(WorkoutSet.timestamp, WorkoutSet.id)
    )
    return list(result.scalars().all())


async def finish(db: AsyncSession, session_id: int) -> WorkoutSession:
    """Complete the session and rotate its program, inside one transaction."""
    session = await _open_session(db, session_id)
    session.is_complete = True
    await db.flush()
    await scheduler.advance(db, session.program_id)
    logger.info("Finished session %s", session.id)
    return session


async def cancel(db: AsyncSession, session_id: int) -> None:
    """Delete the session and every set logged in it. Not reversible."""
    session = await get_session(db, session_id)
    result = await db.execute(
        delete(WorkoutSet).where(WorkoutSet.workout_session_id == session_id)
    )
    await db.delete(session)
    await db.flush()
    logger.info("Cancelled session %s (%d sets removed)", session_id, result.rowcount or 0)
