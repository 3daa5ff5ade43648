"""Exercise catalog: predefined seed plus user-defined exercises."""

from __future__ import annotations

import logging
from collections import defaultdict

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import PREDEFINED_EXERCISES
from app.core.enums import MuscleGroup
from app.core.exceptions import ConstraintError, NotFoundError, ValidationError
from app.db.sequences import resync_id_sequences
from app.models.exercise import Exercise
from app.models.workout import WorkoutSet

logger = logging.getLogger(__name__)


async def list_exercises(db: AsyncSession) -> list[Exercise]:
    result = await db.execute(select(Exercise).order_by(Exercise.name))
    return list(result.scalars().all())


async def list_by_muscle_group(db: AsyncSession, muscle_group: MuscleGroup) -> list[Exercise]:
    result = await db.execute(
        select(Exercise).where(Exercise.muscle_group == muscle_group).order_by(Exercise.name)
    )
    return list(result.scalars().all())


async def group_by_muscle_group(db: AsyncSession) -> dict[MuscleGroup, list[Exercise]]:
    """Exercises keyed by muscle group; groups without exercises are left out."""
    grouped: dict[MuscleGroup, list[Exercise]] = defaultdict(list)
    for exercise in await list_exercises(db):
        grouped[exercise.muscle_group].append(exercise)
    return dict(grouped)


async def get_exercise(db: AsyncSession, exercise_id: int) -> Exercise:
    exercise = await db.get(Exercise, exercise_id)
    if exercise is None:
        raise NotFoundError("Exercise not found")
    return exercise


async def find_by_name(db: AsyncSession, name: str) -> Exercise | None:
    """Case-insensitive lookup by name."""
    result = await db.execute(
        select(Exercise).where(func.lower(Exercise.name) == name.strip().lower())
    )
    return result.scalar_one_or_none()


async def add_custom_exercise(
    db: AsyncSession,
    name: str | None,
    muscle_group: MuscleGroup | str | None,
) -> Exercise:
    """Create a user-defined exercise. Names must be unique ignoring case."""
    name = (name or "").strip()
    if not name or not muscle_group:
        raise ValidationError("Please fill in all fields")
    try:
        muscle_group = MuscleGroup(muscle_group)
    except ValueError:
        raise ValidationError(f"Unknown muscle group: {muscle_group}") from None

    if await find_by_name(db, name) is not None:
        logger.warning("Rejected duplicate exercise name %r", name)
        raise ValidationError("An exercise with this name already exists")

    exercise = Exercise(name=name, muscle_group=muscle_group, is_custom=True, notes="")
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    logger.info("Created custom exercise %s (%s)", exercise.id, exercise.name)
    return exercise


async def update_notes(db: AsyncSession, exercise_id: int, notes: str | None) -> Exercise:
    exercise = await get_exercise(db, exercise_id)
    exercise.notes = notes or ""
    await db.flush()
    return exercise


async def has_history(db: AsyncSession, exercise_id: int) -> bool:
    result = await db.execute(
        select(func.count(WorkoutSet.id)).where(WorkoutSet.exercise_id == exercise_id)
    )
    return (result.scalar() or 0) > 0


async def delete_exercise(db: AsyncSession, exercise_id: int) -> None:
    """Delete an exercise; refused while any logged set references it."""
    exercise = await get_exercise(db, exercise_id)
    if await has_history(db, exercise_id):
        logger.warning("Refused to delete exercise %s: it has workout history", exercise_id)
        raise ConstraintError("This exercise has workout history and cannot be deleted")
    await db.delete(exercise)
    await db.flush()
    logger.info("Deleted exercise %s (%s)", exercise_id, exercise.name)


async def seed_predefined_exercises(db: AsyncSession) -> int:
    """Insert the predefined library into an empty catalog. Returns rows added."""
    count = (await db.execute(select(func.count(Exercise.id)))).scalar() or 0
    if count:
        return 0
    db.add_all(
        Exercise(id=exercise_id, name=name, muscle_group=group, is_custom=False, notes="")
        for exercise_id, name, group in PREDEFINED_EXERCISES
    )
    await db.flush()
    await resync_id_sequences(db, [Exercise.__tablename__])
    logger.info("Seeded %d predefined exercises", len(PREDEFINED_EXERCISES))
    return len(PREDEFINED_EXERCISES)
