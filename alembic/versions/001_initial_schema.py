"""Initial schema: exercises, programs, workout_sessions, workout_sets.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

muscle_group_enum = sa.Enum("legs", "chest", "back", "shoulders", "arms", name="muscle_group")


def upgrade() -> None:
    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("muscle_group", muscle_group_enum, nullable=False),
        sa.Column("is_custom", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("notes", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_exercises_muscle_group", "exercises", ["muscle_group"], unique=False)
    op.create_index("uq_exercises_name_lower", "exercises", [sa.text("lower(name)")], unique=True)

    op.create_table(
        "programs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("workouts", sa.JSON().with_variant(postgresql.JSONB(), "postgresql"), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("current_workout", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_programs_name"), "programs", ["name"], unique=False)
    op.create_index(
        "uq_programs_single_active",
        "programs",
        ["is_active"],
        unique=True,
        sqlite_where=sa.text("is_active = 1"),
        postgresql_where=sa.text("is_active"),
    )

    op.create_table(
        "workout_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("program_id", sa.Integer(), nullable=False),
        sa.Column("workout_number", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_complete", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_workout_sessions_program_workout", "workout_sessions", ["program_id", "workout_number"], unique=False
    )
    op.create_index("ix_workout_sessions_date", "workout_sessions", ["date"], unique=False)
    op.create_index(
        "uq_workout_sessions_single_active",
        "workout_sessions",
        ["is_complete"],
        unique=True,
        sqlite_where=sa.text("is_complete = 0"),
        postgresql_where=sa.text("NOT is_complete"),
    )

    op.create_table(
        "workout_sets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("workout_session_id", sa.Integer(), nullable=False),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=8, scale=2), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["exercise_id"], ["exercises.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["workout_session_id"], ["workout_sessions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_sets_session_id", "workout_sets", ["workout_session_id"], unique=False)
    op.create_index("ix_workout_sets_exercise_id", "workout_sets", ["exercise_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_workout_sets_exercise_id", table_name="workout_sets")
    op.drop_index("ix_workout_sets_session_id", table_name="workout_sets")
    op.drop_table("workout_sets")
    op.drop_index("uq_workout_sessions_single_active", table_name="workout_sessions")
    op.drop_index("ix_workout_sessions_date", table_name="workout_sessions")
    op.drop_index("ix_workout_sessions_program_workout", table_name="workout_sessions")
    op.drop_table("workout_sessions")
    op.drop_index("uq_programs_single_active", table_name="programs")
    op.drop_index(op.f("ix_programs_name"), table_name="programs")
    op.drop_table("programs")
    op.drop_index("uq_exercises_name_lower", table_name="exercises")
    op.drop_index("ix_exercises_muscle_group", table_name="exercises")
    op.drop_table("exercises")
    muscle_group_enum.drop(op.get_bind(), checkfirst=True)
