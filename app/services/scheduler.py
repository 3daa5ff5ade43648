"""Workout scheduler: program activation and workout-day rotation."""

from __future__ import annotations

import logging

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.program import Program
from app.services.program_store import get_program

logger = logging.getLogger(__name__)


def next_workout_number(current_workout: int, total_workouts: int) -> int:
    """Round-robin over workout-day slots: wrap to 1 once the last slot is reached."""
    return 1 if current_workout >= total_workouts else current_workout + 1


async def activate(db: AsyncSession, program_id: int) -> Program:
    """Make program_id the only active program and restart its rotation at workout 1.

    Both updates run in the caller's transaction, deactivation first so the
    single-active index never sees two active rows.
    """
    program = await get_program(db, program_id)
    await db.execute(
        update(Program)
        .where(Program.id != program_id, Program.is_active.is_(True))
        .values(is_active=False)
    )
    await db.execute(
        update(Program).where(Program.id == program_id).values(is_active=True, current_workout=1)
    )
    await db.refresh(program)
    logger.info("Activated program %s (%s)", program.id, program.name)
    return program


async def advance(db: AsyncSession, program_id: int) -> Program | None:
    """Move the program to its next workout day. No-op for a missing or empty program."""
    program = await db.get(Program, program_id)
    if program is None:
        logger.warning("Cannot advance missing program %s", program_id)
        return None

    total = len(program.workouts or [])
    if total == 0:
        return program

    previous = program.current_workout
    program.current_workout = next_workout_number(previous, total)
    await db.flush()
    logger.info("Program %s advanced from workout %s to %s", program_id, previous, program.current_workout)
    return program
