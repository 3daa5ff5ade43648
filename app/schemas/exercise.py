"""Exercise schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import MuscleGroup


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    muscle_group: MuscleGroup


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseNotesUpdate(BaseModel):
    notes: str = Field(default="", max_length=5000)


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    is_custom: bool = False
    notes: str = ""


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in history responses (id + name only)."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
