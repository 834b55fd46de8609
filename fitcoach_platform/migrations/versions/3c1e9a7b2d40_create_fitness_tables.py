"""create fitness and suggestion tables"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3c1e9a7b2d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("user_username", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index(op.f("ix_users_user_username"), "users", ["user_username"], unique=True)

    op.create_table(
        "goals",
        sa.Column("goal_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("goal_description", sa.Text(), nullable=True),
        sa.Column("health_notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"]),
        sa.PrimaryKeyConstraint("goal_id"),
        sa.UniqueConstraint("user_id"),
    )

    op.create_table(
        "workouts",
        sa.Column("workout_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("workout_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"]),
        sa.PrimaryKeyConstraint("workout_id"),
    )
    op.create_index(op.f("ix_workouts_user_id"), "workouts", ["user_id"])
    op.create_index(op.f("ix_workouts_workout_date"), "workouts", ["workout_date"])

    op.create_table(
        "foods",
        sa.Column("food_id", sa.Integer(), nullable=False),
        sa.Column("workout_id", sa.Integer(), nullable=False),
        sa.Column("food_name", sa.String(length=255), nullable=True),
        sa.Column("food_calories", sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.workout_id"]),
        sa.PrimaryKeyConstraint("food_id"),
    )
    op.create_index(op.f("ix_foods_workout_id"), "foods", ["workout_id"])

    op.create_table(
        "exercises",
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("workout_id", sa.Integer(), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("exercise_type", sa.String(length=64), nullable=True),
        sa.Column("exercise_duration", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.workout_id"]),
        sa.PrimaryKeyConstraint("exercise_id"),
    )
    op.create_index(op.f("ix_exercises_workout_id"), "exercises", ["workout_id"])

    op.create_table(
        "suggestions",
        sa.Column("suggestion_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("suggestion_content", sa.Text(), nullable=False),
        sa.Column(
            "suggestion_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"]),
        sa.PrimaryKeyConstraint("suggestion_id"),
    )
    op.create_index(op.f("ix_suggestions_user_id"), "suggestions", ["user_id"])


def downgrade():
    op.drop_index(op.f("ix_suggestions_user_id"), table_name="suggestions")
    op.drop_table("suggestions")
    op.drop_index(op.f("ix_exercises_workout_id"), table_name="exercises")
    op.drop_table("exercises")
    op.drop_index(op.f("ix_foods_workout_id"), table_name="foods")
    op.drop_table("foods")
    op.drop_index(op.f("ix_workouts_workout_date"), table_name="workouts")
    op.drop_index(op.f("ix_workouts_user_id"), table_name="workouts")
    op.drop_table("workouts")
    op.drop_table("goals")
    op.drop_index(op.f("ix_users_user_username"), table_name="users")
    op.drop_table("users")
