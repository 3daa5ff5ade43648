"""Export/import document schemas.

Documents use camelCase keys:
{"version": 1, "exportDate": ..., "data": {"exercises": [], "programs": [], "workoutSessions": [], "sets": []}}
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.core.constants import MAX_WEIGHT, MAX_WORKOUT_NUMBER, MIN_WORKOUT_NUMBER
from app.core.enums import MuscleGroup
from app.db.base import as_utc


class TransferModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ExportExercise(TransferModel):
    id: int
    name: str = Field(..., min_length=1, max_length=255)
    muscle_group: MuscleGroup
    is_custom: bool = False
    notes: str | None = ""


class ExportProgramExercise(TransferModel):
    exercise_id: int
    target_sets: int = Field(..., ge=1)


class ExportWorkoutDef(TransferModel):
    workout_number: int = Field(..., ge=MIN_WORKOUT_NUMBER, le=MAX_WORKOUT_NUMBER)
    exercises: list[ExportProgramExercise] = Field(..., min_length=1)


class ExportProgram(TransferModel):
    id: int
    name: str
    workouts: list[ExportWorkoutDef] = []
    is_active: bool = False
    current_workout: int = Field(default=1, ge=1)


class ExportWorkoutSession(TransferModel):
    id: int
    program_id: int
    workout_number: int
    date: datetime
    is_complete: bool = False

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        return as_utc(v)


class ExportSet(TransferModel):
    id: int
    workout_session_id: int
    exercise_id: int
    weight: float = Field(..., gt=0, lt=MAX_WEIGHT)
    reps: int = Field(..., gt=0)
    timestamp: datetime

    @field_validator("weight")
    @classmethod
    def round_weight(cls, v: float) -> float:
        v = round(v, 2)
        if v <= 0:
            raise ValueError("weight rounds to zero")
        return v

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        return as_utc(v)


class ExportData(TransferModel):
    exercises: list[ExportExercise] = []
    programs: list[ExportProgram] = []
    workout_sessions: list[ExportWorkoutSession] = []
    sets: list[ExportSet] = []


class ExportDocument(TransferModel):
    version: int
    export_date: datetime
    data: ExportData


class ImportSummary(TransferModel):
    """Row counts per collection (import preview and import result)."""

    exercises: int = 0
    programs: int = 0
    workout_sessions: int = 0
    sets: int = 0
