"""Exercise model - predefined and user-defined exercise records."""

from __future__ import annotations

from sqlalchemy import Boolean, Enum, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.enums import MuscleGroup
from app.db.base import Base


class Exercise(Base):
    """Exercise filed under one muscle group. Names are unique ignoring case."""

    __tablename__ = "exercises"
    __table_args__ = (Index("ix_exercises_muscle_group", "muscle_group"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    muscle_group: Mapped[MuscleGroup] = mapped_column(
        Enum(MuscleGroup, name="muscle_group", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    is_custom: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    notes: Mapped[str] = mapped_column(Text, default="", nullable=False)


Index("uq_exercises_name_lower", func.lower(Exercise.name), unique=True)
