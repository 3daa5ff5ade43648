"""Exercise catalog endpoints, plus per-exercise history."""

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.notify import notify_state_changed
from app.core.enums import MuscleGroup, StateChangeKind
from app.db.session import get_db
from app.schemas.exercise import ExerciseCreate, ExerciseNotesUpdate, ExerciseRead, ExerciseRef
from app.schemas.history import ExerciseHistoryRead, HistorySessionGroup, WeightGroup
from app.schemas.workout import WorkoutSetRead
from app.services import exercise_catalog, history

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    muscle_group: MuscleGroup | None = None,
    db: AsyncSession = Depends(get_db),
):
    """List exercises ordered by name, optionally for one muscle group."""
    if muscle_group is not None:
        return await exercise_catalog.list_by_muscle_group(db, muscle_group)
    return await exercise_catalog.list_exercises(db)


@router.get("/grouped", response_model=dict[MuscleGroup, list[ExerciseRead]])
async def list_exercises_grouped(db: AsyncSession = Depends(get_db)):
    """Exercises keyed by muscle group."""
    return await exercise_catalog.group_by_muscle_group(db)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Create a custom exercise (name unique ignoring case)."""
    exercise = await exercise_catalog.add_custom_exercise(db, payload.name, payload.muscle_group)
    notify_state_changed(background_tasks, StateChangeKind.EXERCISES)
    return exercise


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(exercise_id: int, db: AsyncSession = Depends(get_db)):
    return await exercise_catalog.get_exercise(db, exercise_id)


@router.patch("/{exercise_id}/notes", response_model=ExerciseRead)
async def update_exercise_notes(
    exercise_id: int,
    payload: ExerciseNotesUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    exercise = await exercise_catalog.update_notes(db, exercise_id, payload.notes)
    notify_state_changed(background_tasks, StateChangeKind.EXERCISES)
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Delete an exercise. 409 when it has logged sets."""
    await exercise_catalog.delete_exercise(db, exercise_id)
    notify_state_changed(background_tasks, StateChangeKind.EXERCISES)
    return None


@router.get("/{exercise_id}/history", response_model=ExerciseHistoryRead)
async def get_exercise_history(exercise_id: int, db: AsyncSession = Depends(get_db)):
    """All sets of the exercise grouped by session, newest session first."""
    exercise = await exercise_catalog.get_exercise(db, exercise_id)
    groups = await history.history_for(db, exercise_id)
    return ExerciseHistoryRead(
        exercise=ExerciseRef.model_validate(exercise),
        sessions=[
            HistorySessionGroup(
                session_id=g.session.id,
                program_id=g.session.program_id,
                program_name=g.program_name,
                workout_number=g.workout_number,
                date=g.date,
                sets=[WorkoutSetRead.model_validate(s) for s in g.sets],
                weight_groups=[
                    WeightGroup(weight=weight, reps=reps) for weight, reps in history.group_by_weight(g.sets)
                ],
                summary=history.format_performance(g.sets),
            )
            for g in groups
        ],
    )
