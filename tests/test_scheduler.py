import pytest

from app.core.exceptions import NotFoundError
from app.services import program_store, scheduler
from app.services.scheduler import next_workout_number

from helpers import BENCH, make_program


@pytest.mark.parametrize(
    "current, total, expected",
    [(1, 3, 2), (2, 3, 3), (3, 3, 1), (1, 1, 1), (5, 3, 1)],
)
def test_next_workout_number_wraps(current, total, expected):
    assert next_workout_number(current, total) == expected


@pytest.mark.asyncio
async def test_activate_resets_rotation(db):
    program = await make_program(db)
    await scheduler.activate(db, program.id)
    await scheduler.advance(db, program.id)
    assert program.current_workout == 2

    program = await scheduler.activate(db, program.id)
    assert program.is_active is True
    assert program.current_workout == 1


@pytest.mark.asyncio
async def test_at_most_one_active_program_after_any_activation_sequence(db):
    programs = [await make_program(db, f"P{i}") for i in range(4)]
    for index in [0, 2, 2, 1, 3, 0, 3]:
        await scheduler.activate(db, programs[index].id)
        await db.commit()
        listed = await program_store.list_programs(db)
        active = [p.id for p in listed if p.is_active]
        assert active == [programs[index].id]
        assert (await program_store.get_active_program(db)).id == programs[index].id


@pytest.mark.asyncio
async def test_activate_missing_program_leaves_state_alone(db):
    program = await make_program(db)
    await scheduler.activate(db, program.id)
    with pytest.raises(NotFoundError):
        await scheduler.activate(db, 999)
    assert (await program_store.get_active_program(db)).id == program.id


@pytest.mark.asyncio
async def test_advance_cycles_through_workout_days(db):
    program = await make_program(db)
    seen = [program.current_workout]
    for _ in range(4):
        await scheduler.advance(db, program.id)
        seen.append(program.current_workout)
    assert seen == [1, 2, 3, 1, 2]


@pytest.mark.asyncio
async def test_advance_uses_slot_count_not_workout_numbers(db):
    # Days 1 and 5 defined: rotation runs over two slots, 1 -> 2 -> 1
    program = await make_program(db, "Sparse", {1: [BENCH], 5: [BENCH]})
    await scheduler.advance(db, program.id)
    assert program.current_workout == 2
    await scheduler.advance(db, program.id)
    assert program.current_workout == 1


@pytest.mark.asyncio
async def test_advance_is_noop_without_workouts_or_program(db):
    program = await make_program(db, "Empty", {})
    await scheduler.advance(db, program.id)
    assert program.current_workout == 1
    assert await scheduler.advance(db, 999) is None
