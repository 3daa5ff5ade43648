"""Program store: CRUD over programs and their workout-day documents."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.models.exercise import Exercise
from app.models.program import Program
from app.schemas.program import ProgramCreate, ProgramUpdate

logger = logging.getLogger(__name__)


async def _validated_document(db: AsyncSession, data: ProgramCreate | ProgramUpdate) -> tuple[str, list[dict]]:
    """Check the program document and return (name, workouts) ready to persist."""
    name = data.name.strip()
    if not name:
        raise ValidationError("Please enter a program name")

    numbers = [w.workout_number for w in data.workouts]
    duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
    if duplicates:
        raise ValidationError(f"Duplicate workout numbers: {duplicates}")

    exercise_ids = {e.exercise_id for w in data.workouts for e in w.exercises}
    if exercise_ids:
        result = await db.execute(select(Exercise.id).where(Exercise.id.in_(exercise_ids)))
        unknown = exercise_ids - set(result.scalars().all())
        if unknown:
            raise ValidationError(f"Unknown exercise ids: {sorted(unknown)}")

    return name, [w.model_dump() for w in data.workouts]


async def list_programs(db: AsyncSession) -> list[Program]:
    result = await db.execute(select(Program).order_by(Program.id))
    return list(result.scalars().all())


async def get_program(db: AsyncSession, program_id: int) -> Program:
    program = await db.get(Program, program_id)
    if program is None:
        raise NotFoundError("Program not found")
    return program


async def get_active_program(db: AsyncSession) -> Program | None:
    """The active program, or None when no program is active."""
    result = await db.execute(select(Program).where(Program.is_active.is_(True)))
    return result.scalars().first()


async def create_program(db: AsyncSession, data: ProgramCreate) -> Program:
    name, workouts = await _validated_document(db, data)
    program = Program(name=name, workouts=workouts, is_active=False, current_workout=1)
    db.add(program)
    await db.flush()
    await db.refresh(program)
    logger.info("Created program %s (%s) with %d workout days", program.id, name, len(workouts))
    return program


async def update_program(db: AsyncSession, program_id: int, data: ProgramUpdate) -> Program:
    """Replace name and workout days. Activation state and rotation pointer are kept."""
    program = await get_program(db, program_id)
    name, workouts = await _validated_document(db, data)
    program.name = name
    program.workouts = workouts
    await db.flush()
    await db.refresh(program)
    logger.info("Updated program %s (%s)", program.id, name)
    return program


async def delete_program(db: AsyncSession, program_id: int) -> None:
    """Delete a program. Its sessions and sets stay as orphaned history."""
    program = await get_program(db, program_id)
    await db.delete(program)
    await db.flush()
    logger.info("Deleted program %s (%s); session history kept", program_id, program.name)
