"""Workout, food and exercise logs."""

from __future__ import annotations

from datetime import date

from ..extensions import db


class Workout(db.Model):
    """A training day owned by one user; parent of its food and exercise rows."""

    __tablename__ = "workouts"

    id = db.Column("workout_id", db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.user_id"), nullable=False, index=True)
    workout_date = db.Column(db.Date, nullable=False, index=True)

    user = db.relationship("User", back_populates="workouts")
    foods = db.relationship(
        "Food",
        back_populates="workout",
        cascade="all, delete-orphan",
    )
    exercises = db.relationship(
        "Exercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="Exercise.id",
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        date_str = self.workout_date.isoformat() if isinstance(self.workout_date, date) else "N/A"
        return f"<Workout user_id={self.user_id} date={date_str}>"


class Food(db.Model):
    __tablename__ = "foods"

    id = db.Column("food_id", db.Integer, primary_key=True)
    workout_id = db.Column(db.Integer, db.ForeignKey("workouts.workout_id"), nullable=False, index=True)
    food_name = db.Column(db.String(255))
    food_calories = db.Column(db.Float)

    workout = db.relationship("Workout", back_populates="foods")


class Exercise(db.Model):
    __tablename__ = "exercises"

    id = db.Column("exercise_id", db.Integer, primary_key=True)
    workout_id = db.Column(db.Integer, db.ForeignKey("workouts.workout_id"), nullable=False, index=True)
    exercise_name = db.Column(db.String(255), nullable=False)
    exercise_type = db.Column(db.String(64))
    exercise_duration = db.Column(db.Integer)

    workout = db.relationship("Workout", back_populates="exercises")
