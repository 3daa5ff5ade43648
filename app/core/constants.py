"""Application constants."""

from app.core.enums import MuscleGroup

# Program builder: workout-day slots per program
MIN_WORKOUT_NUMBER = 1
MAX_WORKOUT_NUMBER = 7

# Export document
EXPORT_VERSION = 1

UNKNOWN_PROGRAM_NAME = "Unknown Program"
WEIGHT_UNIT = "kg"
# Weights are stored with two decimals; anything at or above this overflows the column
MAX_WEIGHT = 1_000_000

# Pre-defined exercise library, seeded into an empty catalog
PREDEFINED_EXERCISES: list[tuple[int, str, MuscleGroup]] = [
    # Legs
    (1, "Backsquat", MuscleGroup.LEGS),
    (2, "Front Squat", MuscleGroup.LEGS),
    (3, "Romanian Deadlift", MuscleGroup.LEGS),
    (4, "Leg Press", MuscleGroup.LEGS),
    (5, "Leg Curl", MuscleGroup.LEGS),
    # Chest
    (6, "Flat Bench Press", MuscleGroup.CHEST),
    (7, "Incline Bench Press", MuscleGroup.CHEST),
    (8, "Dumbbell Fly", MuscleGroup.CHEST),
    # Back
    (9, "Deadlift", MuscleGroup.BACK),
    (10, "Barbell Row", MuscleGroup.BACK),
    (11, "Pull-up", MuscleGroup.BACK),
    (12, "Lat Pulldown", MuscleGroup.BACK),
    # Shoulders
    (13, "Overhead Press", MuscleGroup.SHOULDERS),
    (14, "Lateral Raise", MuscleGroup.SHOULDERS),
    (15, "Face Pull", MuscleGroup.SHOULDERS),
    # Arms
    (16, "Barbell Curl", MuscleGroup.ARMS),
    (17, "Hammer Curl", MuscleGroup.ARMS),
    (18, "Tricep Pushdown", MuscleGroup.ARMS),
    (19, "Overhead Tricep Extension", MuscleGroup.ARMS),
    (20, "Close-Grip Bench Press", MuscleGroup.ARMS),
]
