"""Program CRUD, activation and rotation endpoints."""

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.notify import notify_state_changed
from app.core.enums import StateChangeKind
from app.db.session import get_db
from app.schemas.program import ProgramCreate, ProgramRead, ProgramUpdate
from app.services import program_store, scheduler

router = APIRouter()


@router.get("", response_model=list[ProgramRead])
async def list_programs(db: AsyncSession = Depends(get_db)):
    return await program_store.list_programs(db)


@router.get("/active", response_model=ProgramRead | None)
async def get_active_program(db: AsyncSession = Depends(get_db)):
    """The active program, or null when none is active."""
    return await program_store.get_active_program(db)


@router.post("", response_model=ProgramRead, status_code=201)
async def create_program(
    payload: ProgramCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Create a program from a full document (name + workout days)."""
    program = await program_store.create_program(db, payload)
    notify_state_changed(background_tasks, StateChangeKind.PROGRAMS)
    return program


@router.get("/{program_id}", response_model=ProgramRead)
async def get_program(program_id: int, db: AsyncSession = Depends(get_db)):
    return await program_store.get_program(db, program_id)


@router.put("/{program_id}", response_model=ProgramRead)
async def update_program(
    program_id: int,
    payload: ProgramUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Replace the program's name and workout days."""
    program = await program_store.update_program(db, program_id, payload)
    notify_state_changed(background_tasks, StateChangeKind.PROGRAMS)
    return program


@router.delete("/{program_id}", status_code=204)
async def delete_program(
    program_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Delete a program; its workout history is kept."""
    await program_store.delete_program(db, program_id)
    notify_state_changed(background_tasks, StateChangeKind.PROGRAMS)
    return None


@router.post("/{program_id}/activate", response_model=ProgramRead)
async def activate_program(
    program_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Make this the only active program, starting again from workout 1."""
    program = await scheduler.activate(db, program_id)
    notify_state_changed(background_tasks, StateChangeKind.PROGRAMS)
    return program


@router.post("/{program_id}/advance", response_model=ProgramRead)
async def advance_program(
    program_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Re-drive the rotation manually (e.g. after a completed session did not advance)."""
    await program_store.get_program(db, program_id)
    program = await scheduler.advance(db, program_id)
    notify_state_changed(background_tasks, StateChangeKind.PROGRAMS)
    return program
