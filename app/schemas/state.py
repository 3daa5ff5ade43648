"""Application state snapshot served to the presentation layer."""

from pydantic import BaseModel

from app.schemas.exercise import ExerciseRead
from app.schemas.program import ProgramRead
from app.schemas.workout import WorkoutSessionRead


class AppStateRead(BaseModel):
    exercises: list[ExerciseRead] = []
    programs: list[ProgramRead] = []
    active_program: ProgramRead | None = None
    active_workout: WorkoutSessionRead | None = None
    revision: int = 0
