from __future__ import annotations

from dataclasses import dataclass
from textwrap import dedent
from typing import Sequence

NO_GOAL_TEXT = "No goal provided"
NO_HEALTH_NOTES_TEXT = "No health notes"
NO_WORKOUTS_TEXT = "No workouts logged"

SUGGESTION_TEMPLATE = dedent(
    """
    The user has the following goal: {goal}.
    Health notes: {health_notes}.
    They consumed a total of {total_calories} calories this week and worked out on {workout_days} days.
    Workouts done: {workouts}.
    User's question: "{question}".
    Based on this information, provide a suggestion in 2-3 sentences.
    """
).strip()


@dataclass(frozen=True)
class SuggestionContext:
    """Everything the prompt needs, already resolved from the database."""

    goal: str
    health_notes: str
    total_calories: float
    workout_days: int
    exercise_names: Sequence[str]
    question: str


def format_calories(value) -> str:
    number = float(value or 0)
    if number.is_integer():
        return str(int(number))
    return str(number)


def render_suggestion_prompt(context: SuggestionContext) -> str:
    workouts = ", ".join(context.exercise_names) or NO_WORKOUTS_TEXT
    return SUGGESTION_TEMPLATE.format(
        goal=context.goal,
        health_notes=context.health_notes,
        total_calories=format_calories(context.total_calories),
        workout_days=context.workout_days,
        workouts=workouts,
        question=context.question,
    )
