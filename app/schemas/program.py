"""Program and workout-day definition schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_WORKOUT_NUMBER, MIN_WORKOUT_NUMBER


class ProgramExercise(BaseModel):
    """Exercise slot inside a workout day; target_sets is advisory only."""

    exercise_id: int
    target_sets: int = Field(default=3, ge=1)


class WorkoutDef(BaseModel):
    workout_number: int = Field(..., ge=MIN_WORKOUT_NUMBER, le=MAX_WORKOUT_NUMBER)
    exercises: list[ProgramExercise] = Field(..., min_length=1)


class ProgramBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    workouts: list[WorkoutDef] = []


class ProgramCreate(ProgramBase):
    pass


class ProgramUpdate(ProgramBase):
    """Full replacement of name and workout days; activation state is left alone."""

    pass


class ProgramRead(ProgramBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    is_active: bool = False
    current_workout: int = 1
    created_at: datetime | None = None
