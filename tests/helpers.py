"""Shared builders for the test suite."""

from app.schemas.program import ProgramCreate
from app.services import program_store

# Predefined exercise ids
BACKSQUAT = 1
BENCH = 6
DEADLIFT = 9
OVERHEAD_PRESS = 13
BARBELL_CURL = 16


def program_document(name: str, days: dict[int, list[int]], target_sets: int = 3) -> ProgramCreate:
    """{workout_number: [exercise ids]} -> ProgramCreate."""
    return ProgramCreate(
        name=name,
        workouts=[
            {
                "workout_number": number,
                "exercises": [{"exercise_id": ex, "target_sets": target_sets} for ex in exercises],
            }
            for number, exercises in days.items()
        ],
    )


def program_payload(name: str, days: dict[int, list[int]], target_sets: int = 3) -> dict:
    """Same document as JSON for the HTTP API."""
    return program_document(name, days, target_sets).model_dump()


async def make_program(db, name: str = "PPL", days: dict[int, list[int]] | None = None):
    if days is None:
        days = {1: [BENCH], 2: [DEADLIFT], 3: [BACKSQUAT]}
    program = await program_store.create_program(db, program_document(name, days))
    await db.commit()
    return program
