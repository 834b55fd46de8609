"""User domain models."""

from __future__ import annotations

from ..extensions import db


class User(db.Model):
    """Account whose workouts, meals and goal feed the suggestion prompt."""

    __tablename__ = "users"

    id = db.Column("user_id", db.Integer, primary_key=True)
    username = db.Column("user_username", db.String(64), unique=True, nullable=False, index=True)

    workouts = db.relationship(
        "Workout",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    goal = db.relationship(
        "Goal",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.username}>"


class Goal(db.Model):
    """Standing goal and free-text health notes, at most one per user."""

    __tablename__ = "goals"

    id = db.Column("goal_id", db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.user_id"), unique=True, nullable=False)
    goal_description = db.Column(db.Text)
    health_notes = db.Column(db.Text)

    user = db.relationship("User", back_populates="goal")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Goal user_id={self.user_id}>"
