"""refresh_state: the snapshot the presentation layer reloads after every mutation."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.exercise import Exercise
from app.models.program import Program
from app.models.workout import WorkoutSession
from app.services.exercise_catalog import list_exercises
from app.services.program_store import get_active_program, list_programs
from app.services.session_manager import get_active_session


@dataclass
class AppState:
    exercises: list[Exercise]
    programs: list[Program]
    active_program: Program | None
    active_workout: WorkoutSession | None
    revision: int = 0


async def refresh_state(db: AsyncSession, revision: int = 0) -> AppState:
    return AppState(
        exercises=await list_exercises(db),
        programs=await list_programs(db),
        active_program=await get_active_program(db),
        active_workout=await get_active_session(db),
        revision=revision,
    )
