"""History aggregation: per-exercise history, "last time" lookups and performance formatting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import WEIGHT_UNIT
from app.models.program import Program
from app.models.workout import WorkoutSession, WorkoutSet
from app.services.exercise_catalog import get_exercise


@dataclass
class SessionSets:
    """Sets grouped under the session that owns them, annotated for display."""

    session: WorkoutSession
    program_name: str | None
    sets: list[WorkoutSet] = field(default_factory=list)

    @property
    def date(self) -> datetime:
        return self.session.date

    @property
    def workout_number(self) -> int:
        return self.session.workout_number


def format_weight(weight: float) -> str:
    """60.0 -> "60", 62.5 -> "62.5", 123456.5 -> "123456.5"."""
    return f"{float(weight):.2f}".rstrip("0").rstrip(".")


def group_by_weight(sets: Iterable) -> list[tuple[float, list[int]]]:
    """Group sets by weight: heaviest group first, reps kept in logging order.

    Accepts ORM sets or anything with weight/reps attributes (or mapping keys).
    """
    by_weight: dict[float, list[int]] = {}
    for s in sets:
        weight = s["weight"] if isinstance(s, dict) else s.weight
        reps = s["reps"] if isinstance(s, dict) else s.reps
        by_weight.setdefault(float(weight), []).append(int(reps))
    return sorted(by_weight.items(), key=lambda item: item[0], reverse=True)


def format_performance(sets: Iterable) -> str:
    """Render sets as e.g. "70kg × 4 reps and 60kg × 8, 6 reps"."""
    parts = [
        f"{format_weight(weight)}{WEIGHT_UNIT} × {', '.join(str(r) for r in reps)} reps"
        for weight, reps in group_by_weight(sets)
    ]
    return " and ".join(parts)


async def history_for(db: AsyncSession, exercise_id: int) -> list[SessionSets]:
    """Every set of an exercise, grouped by session, newest session first."""
    await get_exercise(db, exercise_id)
    result = await db.execute(
        select(WorkoutSet, WorkoutSession, Program.name)
        .join(WorkoutSession, WorkoutSession.id == WorkoutSet.workout_session_id)
        .outerjoin(Program, Program.id == WorkoutSession.program_id)
        .where(WorkoutSet.exercise_id == exercise_id)
        .order_by(
            WorkoutSession.date.desc(),
            WorkoutSession.id.desc(),
            WorkoutSet.timestamp,
            WorkoutSet.id,
        )
    )
    groups: dict[int, SessionSets] = {}
    for set_, session, program_name in result.all():
        group = groups.get(session.id)
        if group is None:
            group = groups[session.id] = SessionSets(session=session, program_name=program_name)
        group.sets.append(set_)
    # dicts keep insertion order, which follows the query's date ordering
    return list(groups.values())


async def last_completed_workout(
    db: AsyncSession,
    program_id: int,
    workout_number: int,
) -> tuple[WorkoutSession, list[WorkoutSet]] | None:
    """Most recent completed session for (program, workout day) with all its sets, or None."""
    result = await db.execute(
        select(WorkoutSession)
        .where(
            WorkoutSession.program_id == program_id,
            WorkoutSession.workout_number == workout_number,
            WorkoutSession.is_complete.is_(True),
        )
        .order_by(WorkoutSession.date.desc(), WorkoutSession.id.desc())
        .limit(1)
    )
    session = result.scalar_one_or_none()
    if session is None:
        return None
    sets = await db.execute(
        select(WorkoutSet)
        .where(WorkoutSet.workout_session_id == session.id)
        .order_by(WorkoutSet.timestamp, WorkoutSet.id)
    )
    return session, list(sets.scalars().all())


async def last_time_for(
    db: AsyncSession,
    program_id: int,
    workout_number: int,
    exercise_id: int,
) -> tuple[WorkoutSession, list[WorkoutSet]] | None:
    """What was done for one exercise the last time this workout day was completed."""
    last = await last_completed_workout(db, program_id, workout_number)
    if last is None:
        return None
    session, sets = last
    exercise_sets = [s for s in sets if s.exercise_id == exercise_id]
    if not exercise_sets:
        return None
    return session, exercise_sets

