"""WorkoutSession and WorkoutSet models."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, UTCDateTime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkoutSession(Base):
    """One real-world occurrence of a program's workout day.

    program_id carries no foreign key: deleting a program keeps its sessions
    (orphaned history) with the old id.
    """

    __tablename__ = "workout_sessions"
    __table_args__ = (
        Index("ix_workout_sessions_program_workout", "program_id", "workout_number"),
        Index("ix_workout_sessions_date", "date"),
        # At most one incomplete (active) session
        Index(
            "uq_workout_sessions_single_active",
            "is_complete",
            unique=True,
            sqlite_where=text("is_complete = 0"),
            postgresql_where=text("NOT is_complete"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    program_id: Mapped[int] = mapped_column(Integer, nullable=False)
    workout_number: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[datetime] = mapped_column(UTCDateTime, default=_utcnow, nullable=False)
    is_complete: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class WorkoutSet(Base):
    """One logged set: weight x reps for an exercise inside a session."""

    __tablename__ = "workout_sets"
    __table_args__ = (
        Index("ix_workout_sets_session_id", "workout_session_id"),
        Index("ix_workout_sets_exercise_id", "exercise_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    workout_session_id: Mapped[int] = mapped_column(
        ForeignKey("workout_sessions.id", ondelete="CASCADE"), nullable=False
    )
    exercise_id: Mapped[int] = mapped_column(
        ForeignKey("exercises.id", ondelete="RESTRICT"), nullable=False
    )
    weight: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(UTCDateTime, default=_utcnow, nullable=False)

    session: Mapped["WorkoutSession"] = relationship("WorkoutSession", back_populates="sets")
