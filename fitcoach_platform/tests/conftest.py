"""Pytest configuration for ensuring project modules resolve correctly."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from fitcoach_app import create_app
from fitcoach_app.extensions import db
from fitcoach_app.models import Exercise, Food, Goal, User, Workout

TODAY = date(2024, 3, 15)


class FakeGenerator:
    """Stands in for the AI client; records prompts and returns canned replies."""

    def __init__(self, replies=None, error: Exception | None = None):
        self.replies = list(replies or ["Keep it up and add one rest day."])
        self.error = error
        self.calls = []

    def complete(self, prompt, *, model=None, max_tokens=None, temperature=0.7):
        self.calls.append(
            {"prompt": prompt, "model": model, "max_tokens": max_tokens, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]


@pytest.fixture()
def app_with_db():
    app = create_app("test")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app_with_db):
    return app_with_db.test_client()


def create_user(username: str, goal: tuple[str | None, str | None] | None = None) -> int:
    user = User(username=username)
    if goal is not None:
        user.goal = Goal(goal_description=goal[0], health_notes=goal[1])
    db.session.add(user)
    db.session.commit()
    return user.id


def add_workout(
    user_id: int,
    workout_date: date,
    foods: list[tuple[str, float | None]] = (),
    exercises: list[tuple[str, str, int]] = (),
) -> int:
    workout = Workout(user_id=user_id, workout_date=workout_date)
    workout.foods = [Food(food_name=name, food_calories=kcal) for name, kcal in foods]
    workout.exercises = [
        Exercise(exercise_name=name, exercise_type=kind, exercise_duration=minutes)
        for name, kind, minutes in exercises
    ]
    db.session.add(workout)
    db.session.commit()
    return workout.id


@pytest.fixture()
def bob_id(app_with_db):
    """A user with a goal and a mix of in-window and stale workouts."""

    user_id = create_user("bob", goal=("Run a half marathon", "Asthma, carries inhaler"))
    add_workout(
        user_id,
        TODAY,
        foods=[("Pasta", 600), ("Banana", 105)],
        exercises=[("Running", "cardio", 40), ("Stretching", "mobility", 10)],
    )
    add_workout(
        user_id,
        TODAY - timedelta(days=2),
        foods=[("Rice bowl", 450)],
        exercises=[("Swimming", "cardio", 30)],
    )
    # Same calendar day as above, second session.
    add_workout(
        user_id,
        TODAY - timedelta(days=2),
        exercises=[("Yoga", "mobility", 20)],
    )
    # Outside the trailing 7-day window.
    add_workout(
        user_id,
        TODAY - timedelta(days=7),
        foods=[("Pizza", 1200)],
        exercises=[("Rowing", "cardio", 25)],
    )
    return user_id
