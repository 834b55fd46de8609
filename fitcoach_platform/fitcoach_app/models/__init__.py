"""Database models package."""

from .user import User, Goal
from .fitness import Workout, Food, Exercise
from .suggestion import Suggestion

__all__ = [
    "User",
    "Goal",
    "Workout",
    "Food",
    "Exercise",
    "Suggestion",
]
