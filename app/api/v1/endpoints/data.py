"""Export / import of all data as one JSON document."""

from typing import Any

from fastapi import APIRouter, BackgroundTasks, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.notify import notify_state_changed
from app.core.enums import StateChangeKind
from app.db.session import get_db
from app.schemas.transfer import ExportDocument, ImportSummary
from app.services import data_transfer

router = APIRouter()


@router.get("/export", response_model=ExportDocument)
async def export_data(db: AsyncSession = Depends(get_db)):
    """Everything in the store: {version, exportDate, data: {exercises, programs, workoutSessions, sets}}."""
    return await data_transfer.export_all_data(db)


@router.post("/import/preview", response_model=ImportSummary)
async def preview_import(document: dict[str, Any] = Body(...)):
    """Validate a document and report how many rows an import would write."""
    return data_transfer.import_preview(document)


@router.post("/import", response_model=ImportSummary)
async def import_data(
    background_tasks: BackgroundTasks,
    document: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Replace ALL existing data with the document's contents."""
    summary = await data_transfer.import_all_data(db, document)
    notify_state_changed(background_tasks, StateChangeKind.IMPORT)
    return summary
