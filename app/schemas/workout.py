"""WorkoutSession and WorkoutSet schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.schemas.program import ProgramRead, WorkoutDef


class WorkoutSetBase(BaseModel):
    exercise_id: int
    weight: float
    reps: int


class WorkoutSetCreate(WorkoutSetBase):
    pass


class WorkoutSetUpdate(BaseModel):
    weight: float
    reps: int


class WorkoutSetRead(WorkoutSetBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    workout_session_id: int
    timestamp: datetime


class WorkoutSessionCreate(BaseModel):
    program_id: int


class WorkoutSessionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    program_id: int
    workout_number: int
    date: datetime
    is_complete: bool


class WorkoutPreviewRead(BaseModel):
    """What the workout screen shows: active program, today's slot and any session in progress.

    workout is None when the current slot has no definition (empty state).
    """

    program: ProgramRead | None = None
    workout_number: int | None = None
    workout: WorkoutDef | None = None
    active_session: WorkoutSessionRead | None = None


class LastCompletedWorkoutRead(BaseModel):
    session: WorkoutSessionRead
    sets: list[WorkoutSetRead] = []
