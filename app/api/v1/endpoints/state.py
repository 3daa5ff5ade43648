"""State snapshot for clients that reload after every mutation."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.exercise import ExerciseRead
from app.schemas.program import ProgramRead
from app.schemas.state import AppStateRead
from app.schemas.workout import WorkoutSessionRead
from app.services.events import EventBus, get_event_bus
from app.services.state import refresh_state

router = APIRouter()


@router.get("", response_model=AppStateRead)
async def get_state(
    db: AsyncSession = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
):
    """Exercises, programs, active program and active workout. revision grows with every change."""
    state = await refresh_state(db, revision=bus.revision)
    return AppStateRead(
        exercises=[ExerciseRead.model_validate(e) for e in state.exercises],
        programs=[ProgramRead.model_validate(p) for p in state.programs],
        active_program=ProgramRead.model_validate(state.active_program) if state.active_program else None,
        active_workout=(
            WorkoutSessionRead.model_validate(state.active_workout) if state.active_workout else None
        ),
        revision=state.revision,
    )
