"""Shared enums for models and API."""

from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle group an exercise is filed under."""

    LEGS = "legs"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class StateChangeKind(str, Enum):
    """Which part of the store a mutation touched."""

    EXERCISES = "exercises"
    PROGRAMS = "programs"
    SESSION = "session"
    SETS = "sets"
    IMPORT = "import"
