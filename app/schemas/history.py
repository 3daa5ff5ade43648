"""Exercise history and "last time" schemas."""

from datetime import datetime

from pydantic import BaseModel

from app.schemas.exercise import ExerciseRef
from app.schemas.workout import WorkoutSetRead


class WeightGroup(BaseModel):
    """Reps performed at one weight, in logging order."""

    weight: float
    reps: list[int]


class HistorySessionGroup(BaseModel):
    session_id: int
    program_id: int
    program_name: str | None = None  # None when the program was deleted
    workout_number: int
    date: datetime
    sets: list[WorkoutSetRead] = []
    weight_groups: list[WeightGroup] = []
    summary: str = ""


class ExerciseHistoryRead(BaseModel):
    exercise: ExerciseRef
    sessions: list[HistorySessionGroup] = []


class LastTimeRead(BaseModel):
    session_id: int
    date: datetime
    sets: list[WorkoutSetRead] = []
    summary: str = ""
