import pytest
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import NotFoundError, ValidationError
from app.schemas.program import ProgramCreate, ProgramUpdate
from app.services import program_store, scheduler, session_manager
from app.services.history import history_for

from helpers import BACKSQUAT, BENCH, DEADLIFT, make_program, program_document


@pytest.mark.asyncio
async def test_create_program_stores_document(db):
    program = await make_program(db, "Upper/Lower", {1: [BENCH, DEADLIFT], 2: [BACKSQUAT]})
    assert program.is_active is False
    assert program.current_workout == 1
    assert program.workouts == [
        {
            "workout_number": 1,
            "exercises": [
                {"exercise_id": BENCH, "target_sets": 3},
                {"exercise_id": DEADLIFT, "target_sets": 3},
            ],
        },
        {"workout_number": 2, "exercises": [{"exercise_id": BACKSQUAT, "target_sets": 3}]},
    ]
    assert program.workout_def(2)["exercises"][0]["exercise_id"] == BACKSQUAT
    assert program.workout_def(3) is None


@pytest.mark.asyncio
async def test_create_program_requires_name(db):
    with pytest.raises(ValidationError, match="program name"):
        await program_store.create_program(db, program_document("   ", {1: [BENCH]}))


@pytest.mark.asyncio
async def test_create_program_rejects_duplicate_workout_numbers(db):
    data = ProgramCreate(
        name="Broken",
        workouts=[
            {"workout_number": 1, "exercises": [{"exercise_id": BENCH}]},
            {"workout_number": 1, "exercises": [{"exercise_id": DEADLIFT}]},
        ],
    )
    with pytest.raises(ValidationError, match="Duplicate workout numbers"):
        await program_store.create_program(db, data)


@pytest.mark.asyncio
async def test_create_program_rejects_unknown_exercise(db):
    with pytest.raises(ValidationError, match="Unknown exercise ids"):
        await program_store.create_program(db, program_document("Ghost", {1: [BENCH, 404]}))


def test_workout_document_shape_is_enforced():
    with pytest.raises(PydanticValidationError):
        ProgramCreate(name="Eight days", workouts=[{"workout_number": 8, "exercises": [{"exercise_id": 1}]}])
    with pytest.raises(PydanticValidationError):
        ProgramCreate(name="Zero sets", workouts=[{"workout_number": 1, "exercises": [{"exercise_id": 1, "target_sets": 0}]}])
    with pytest.raises(PydanticValidationError):
        ProgramCreate(name="Empty day", workouts=[{"workout_number": 1, "exercises": []}])


@pytest.mark.asyncio
async def test_update_replaces_document_and_keeps_rotation(db):
    program = await make_program(db)
    await scheduler.activate(db, program.id)
    await scheduler.advance(db, program.id)

    updated = await program_store.update_program(
        db, program.id, ProgramUpdate(**program_document("PPL v2", {1: [BENCH], 2: [DEADLIFT]}).model_dump())
    )
    assert updated.name == "PPL v2"
    assert len(updated.workouts) == 2
    assert updated.is_active is True
    assert updated.current_workout == 2


@pytest.mark.asyncio
async def test_get_active_returns_none_when_nothing_active(db):
    await make_program(db)
    assert await program_store.get_active_program(db) is None


@pytest.mark.asyncio
async def test_delete_program_keeps_session_history(db):
    program = await make_program(db)
    await scheduler.activate(db, program.id)
    session = await session_manager.start(db, program.id)
    await session_manager.log_set(db, session.id, BENCH, 80, 5)
    await session_manager.finish(db, session.id)

    await program_store.delete_program(db, program.id)

    with pytest.raises(NotFoundError):
        await program_store.get_program(db, program.id)
    groups = await history_for(db, BENCH)
    assert len(groups) == 1
    assert groups[0].session.program_id == program.id
    assert groups[0].program_name is None


@pytest.mark.asyncio
async def test_deleted_program_id_is_not_reused(db):
    first = await make_program(db, "First")
    await program_store.delete_program(db, first.id)
    second = await make_program(db, "Second")
    assert second.id != first.id
