"""Read/write access to the fitness tables used by the suggestion pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List

from sqlalchemy import func

from ..extensions import db
from ..models import Exercise, Food, Goal, Suggestion, User, Workout


@dataclass(frozen=True)
class ExerciseEntry:
    name: str
    type: str | None
    duration: int | None
    workout_date: date


@dataclass(frozen=True)
class GoalContext:
    description: str | None
    health_notes: str | None


class FitnessStore:
    """SQLAlchemy-backed queries scoped to a single user and date window."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def find_user_id(self, username: str) -> int | None:
        return self.session.execute(
            db.select(User.id).where(User.username == username)
        ).scalar_one_or_none()

    def total_calories(self, user_id: int, start: date, end: date) -> float:
        total = self.session.execute(
            db.select(func.coalesce(func.sum(Food.food_calories), 0))
            .join(Workout, Food.workout_id == Workout.id)
            .where(
                Workout.user_id == user_id,
                Workout.workout_date >= start,
                Workout.workout_date <= end,
            )
        ).scalar()
        return total or 0

    def list_exercises(self, user_id: int, start: date, end: date) -> List[ExerciseEntry]:
        rows = self.session.execute(
            db.select(
                Exercise.exercise_name,
                Exercise.exercise_type,
                Exercise.exercise_duration,
                Workout.workout_date,
            )
            .join(Workout, Exercise.workout_id == Workout.id)
            .where(
                Workout.user_id == user_id,
                Workout.workout_date >= start,
                Workout.workout_date <= end,
            )
            .order_by(Workout.workout_date, Exercise.id)
        ).all()
        return [
            ExerciseEntry(
                name=row.exercise_name,
                type=row.exercise_type,
                duration=row.exercise_duration,
                workout_date=row.workout_date,
            )
            for row in rows
        ]

    def get_goal(self, user_id: int) -> GoalContext | None:
        goal = self.session.execute(
            db.select(Goal).where(Goal.user_id == user_id)
        ).scalar_one_or_none()
        if goal is None:
            return None
        return GoalContext(description=goal.goal_description, health_notes=goal.health_notes)

    def rollback(self) -> None:
        self.session.rollback()

    def replace_suggestion(self, user_id: int, content: str) -> int:
        """Delete the user's stored suggestion and insert ``content`` in one transaction.

        The owning user row is locked first so concurrent replacements for the
        same user serialize on databases that support ``SELECT ... FOR UPDATE``.
        Returns the primary key of the new row, read after the flush so no
        further query runs once the transaction commits.
        """

        session = self.session
        try:
            session.execute(
                db.select(User.id).where(User.id == user_id).with_for_update()
            )
            session.execute(
                db.delete(Suggestion)
                .where(Suggestion.user_id == user_id)
                .execution_options(synchronize_session="fetch")
            )
            record = Suggestion(user_id=user_id, content=content)
            session.add(record)
            session.flush()
            suggestion_id = record.id
            session.commit()
        except Exception:
            session.rollback()
            raise
        return suggestion_id
