"""Export and import of the whole store (exercises, programs, sessions, sets)."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import EXPORT_VERSION
from app.core.exceptions import FormatError
from app.db.sequences import resync_id_sequences
from app.models.exercise import Exercise
from app.models.program import Program
from app.models.workout import WorkoutSession, WorkoutSet
from app.schemas.transfer import (
    ExportData,
    ExportDocument,
    ExportExercise,
    ExportProgram,
    ExportSet,
    ExportWorkoutSession,
    ImportSummary,
)

logger = logging.getLogger(__name__)


async def export_all_data(db: AsyncSession) -> ExportDocument:
    exercises = (await db.execute(select(Exercise).order_by(Exercise.id))).scalars().all()
    programs = (await db.execute(select(Program).order_by(Program.id))).scalars().all()
    sessions = (await db.execute(select(WorkoutSession).order_by(WorkoutSession.id))).scalars().all()
    sets = (await db.execute(select(WorkoutSet).order_by(WorkoutSet.id))).scalars().all()

    data = ExportData(
        exercises=[
            ExportExercise(
                id=e.id,
                name=e.name,
                muscle_group=e.muscle_group,
                is_custom=e.is_custom,
                notes=e.notes,
            )
            for e in exercises
        ],
        programs=[
            ExportProgram(
                id=p.id,
                name=p.name,
                workouts=p.workouts or [],
                is_active=p.is_active,
                current_workout=p.current_workout,
            )
            for p in programs
        ],
        workout_sessions=[
            ExportWorkoutSession(
                id=s.id,
                program_id=s.program_id,
                workout_number=s.workout_number,
                date=s.date,
                is_complete=s.is_complete,
            )
            for s in sessions
        ],
        sets=[
            ExportSet(
                id=s.id,
                workout_session_id=s.workout_session_id,
                exercise_id=s.exercise_id,
                weight=s.weight,
                reps=s.reps,
                timestamp=s.timestamp,
            )
            for s in sets
        ],
    )
    logger.info(
        "Exported %d exercises, %d programs, %d sessions, %d sets",
        len(exercises), len(programs), len(sessions), len(sets),
    )
    return ExportDocument(
        version=EXPORT_VERSION,
        export_date=datetime.now(timezone.utc),
        data=data,
    )


def _duplicates(values) -> list:
    return sorted(v for v, n in Counter(values).items() if n > 1)


def parse_import_document(document: Any) -> ExportData:
    """Validate an import document and return its collections. Raises FormatError."""
    if not isinstance(document, dict) or not document.get("version") or document.get("data") is None:
        raise FormatError("Invalid data format: 'version' and 'data' are required")
    if document["version"] != EXPORT_VERSION:
        raise FormatError(f"Unsupported export version: {document['version']}")
    try:
        data = ExportData.model_validate(document["data"])
    except PydanticValidationError as e:
        raise FormatError(f"Invalid data format: {e.error_count()} invalid field(s)") from e

    for label, ids in (
        ("exercise", [e.id for e in data.exercises]),
        ("program", [p.id for p in data.programs]),
        ("workout session", [s.id for s in data.workout_sessions]),
        ("set", [s.id for s in data.sets]),
    ):
        dupes = _duplicates(ids)
        if dupes:
            raise FormatError(f"Duplicate {label} ids: {dupes}")

    dupes = _duplicates(e.name.strip().lower() for e in data.exercises)
    if dupes:
        raise FormatError(f"Duplicate exercise names: {dupes}")
    if sum(p.is_active for p in data.programs) > 1:
        raise FormatError("More than one active program")
    if sum(not s.is_complete for s in data.workout_sessions) > 1:
        raise FormatError("More than one incomplete workout session")

    exercise_ids = {e.id for e in data.exercises}
    for p in data.programs:
        dupes = _duplicates(w.workout_number for w in p.workouts)
        if dupes:
            raise FormatError(f"Program {p.id} has duplicate workout numbers: {dupes}")
        unknown = sorted({e.exercise_id for w in p.workouts for e in w.exercises} - exercise_ids)
        if unknown:
            raise FormatError(f"Program {p.id} references unknown exercises: {unknown}")

    session_ids = {s.id for s in data.workout_sessions}
    for s in data.sets:
        if s.workout_session_id not in session_ids:
            raise FormatError(f"Set {s.id} references unknown workout session {s.workout_session_id}")
        if s.exercise_id not in exercise_ids:
            raise FormatError(f"Set {s.id} references unknown exercise {s.exercise_id}")
    return data


def _summary(data: ExportData) -> ImportSummary:
    return ImportSummary(
        exercises=len(data.exercises),
        programs=len(data.programs),
        workout_sessions=len(data.workout_sessions),
        sets=len(data.sets),
    )


def import_preview(document: Any) -> ImportSummary:
    """Row counts an import would write, after the same validation as the import itself."""
    return _summary(parse_import_document(document))


async def import_all_data(db: AsyncSession, document: Any) -> ImportSummary:
    """Replace all four collections with the document's contents.

    Runs in the caller's transaction: either everything is replaced or nothing is.
    """
    data = parse_import_document(document)

    await db.execute(delete(WorkoutSet))
    await db.execute(delete(WorkoutSession))
    await db.execute(delete(Program))
    await db.execute(delete(Exercise))
    await db.flush()
    db.expunge_all()

    db.add_all(
        Exercise(
            id=e.id,
            name=e.name.strip(),
            muscle_group=e.muscle_group,
            is_custom=e.is_custom,
            notes=e.notes or "",
        )
        for e in data.exercises
    )
    await db.flush()
    db.add_all(
        Program(
            id=p.id,
            name=p.name,
            workouts=[w.model_dump() for w in p.workouts],
            is_active=p.is_active,
            current_workout=p.current_workout,
        )
        for p in data.programs
    )
    await db.flush()
    db.add_all(
        WorkoutSession(
            id=s.id,
            program_id=s.program_id,
            workout_number=s.workout_number,
            date=s.date,
            is_complete=s.is_complete,
        )
        for s in data.workout_sessions
    )
    await db.flush()
    db.add_all(
        WorkoutSet(
            id=s.id,
            workout_session_id=s.workout_session_id,
            exercise_id=s.exercise_id,
            weight=s.weight,
            reps=s.reps,
            timestamp=s.timestamp,
        )
        for s in data.sets
    )
    await db.flush()
    await resync_id_sequences(
        db,
        [Exercise.__tablename__, Program.__tablename__, WorkoutSession.__tablename__, WorkoutSet.__tablename__],
    )

    summary = _summary(data)
    logger.info(
        "Imported %d exercises, %d programs, %d sessions, %d sets (previous data replaced)",
        summary.exercises, summary.programs, summary.workout_sessions, summary.sets,
    )
    return summary
