"""Program model - a named rotation of workout-day definitions."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, JSONDocument, UTCDateTime


class Program(Base):
    """Program with its workout days stored as one JSON document.

    workouts: [{"workout_number": 1, "exercises": [{"exercise_id": 6, "target_sets": 3}, ...]}, ...]
    current_workout is the slot number the next session will use.
    """

    __tablename__ = "programs"
    __table_args__ = (
        # At most one active program
        Index(
            "uq_programs_single_active",
            "is_active",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ),
        # Ids of deleted programs are never reused: orphaned sessions still point at them
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    workouts: Mapped[list[dict]] = mapped_column(JSONDocument, default=list, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    current_workout: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=lambda: datetime.now(timezone.utc)
    )

    def workout_def(self, workout_number: int) -> dict | None:
        """The workout-day definition for a slot, or None when the slot is empty."""
        for workout in self.workouts or []:
            if workout.get("workout_number") == workout_number:
                return workout
        return None
