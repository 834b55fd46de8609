"""Aggregate a user's recent training data and ask the model for a suggestion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from time import perf_counter

from flask import current_app

from ..metrics import record_model_call, record_suggestion
from .ai_client import get_ai_client
from .fitness_store import FitnessStore
from .suggestion_prompts import (
    NO_GOAL_TEXT,
    NO_HEALTH_NOTES_TEXT,
    SuggestionContext,
    render_suggestion_prompt,
)

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found"
GENERIC_FAILURE_MESSAGE = "Failed to process data or generate suggestion"


class SuggestionError(Exception):
    """Base error for the suggestion pipeline."""


class UserNotFound(SuggestionError):
    def __init__(self, username: str):
        super().__init__(USER_NOT_FOUND_MESSAGE)
        self.username = username


class SuggestionGenerationError(SuggestionError):
    """Raised when any step after user resolution fails."""


@dataclass(frozen=True)
class SuggestionSettings:
    window_days: int = 7
    model: str = "gpt-4"
    max_tokens: int = 100
    temperature: float = 0.7
    include_id: bool = False

    @classmethod
    def from_config(cls, config) -> "SuggestionSettings":
        return cls(
            window_days=int(config.get("SUGGESTION_WINDOW_DAYS", 7)),
            model=config.get("SUGGESTION_MODEL", "gpt-4"),
            max_tokens=int(config.get("SUGGESTION_MAX_TOKENS", 100)),
            temperature=float(config.get("SUGGESTION_TEMPERATURE", 0.7)),
            include_id=bool(config.get("SUGGESTION_INCLUDE_ID", False)),
        )


@dataclass(frozen=True)
class SuggestionResult:
    suggestion: str
    suggestion_id: int | None = None

    def to_dict(self, include_id: bool = False) -> dict:
        payload = {"suggestion": self.suggestion}
        if include_id:
            payload["suggestion_id"] = self.suggestion_id
        return payload


def _today() -> date:
    return datetime.now(timezone.utc).date()


def window_bounds(today: date, window_days: int) -> tuple[date, date]:
    """Return the inclusive ``(start, end)`` dates of the trailing window ending ``today``."""

    span = max(1, window_days)
    return today - timedelta(days=span - 1), today


class SuggestionAggregator:
    """Runs the read → prompt → model → replace pipeline for one user."""

    def __init__(self, store: FitnessStore, generator, settings: SuggestionSettings | None = None):
        self.store = store
        self.generator = generator
        self.settings = settings or SuggestionSettings()

    def build_context(self, user_id: int, question: str, today: date | None = None) -> SuggestionContext:
        start, end = window_bounds(today or _today(), self.settings.window_days)
        total_calories = self.store.total_calories(user_id, start, end)
        exercises = self.store.list_exercises(user_id, start, end)
        workout_days = len({entry.workout_date for entry in exercises})
        goal = self.store.get_goal(user_id)
        return SuggestionContext(
            goal=(goal.description if goal else None) or NO_GOAL_TEXT,
            health_notes=(goal.health_notes if goal else None) or NO_HEALTH_NOTES_TEXT,
            total_calories=total_calories or 0,
            workout_days=workout_days,
            exercise_names=[entry.name for entry in exercises],
            question=question,
        )

    def generate(self, username: str, question: str, today: date | None = None) -> SuggestionResult:
        user_id = self.store.find_user_id(username)
        if user_id is None:
            raise UserNotFound(username)

        try:
            context = self.build_context(user_id, question, today=today)
            prompt = render_suggestion_prompt(context)
            logger.debug("Rendered suggestion prompt for user %s:\n%s", user_id, prompt)

            started = perf_counter()
            try:
                suggestion = self.generator.complete(
                    prompt,
                    model=self.settings.model,
                    max_tokens=self.settings.max_tokens,
                    temperature=self.settings.temperature,
                )
            finally:
                record_model_call(self.settings.model, perf_counter() - started)
            if not suggestion or not suggestion.strip():
                raise SuggestionGenerationError("Suggestion model returned empty content")
            suggestion = suggestion.strip()

            suggestion_id = self.store.replace_suggestion(user_id, suggestion)
        except SuggestionGenerationError:
            self.store.rollback()
            raise
        except Exception as exc:
            self.store.rollback()
            raise SuggestionGenerationError(str(exc)) from exc
        return SuggestionResult(suggestion=suggestion, suggestion_id=suggestion_id)


def get_suggestion_aggregator() -> SuggestionAggregator:
    app = current_app
    aggregator = app.extensions.get("suggestion_aggregator")
    if aggregator is None:
        aggregator = SuggestionAggregator(
            store=FitnessStore(),
            generator=get_ai_client(),
            settings=SuggestionSettings.from_config(app.config),
        )
        app.extensions["suggestion_aggregator"] = aggregator
    return aggregator


def generate_suggestion(username: str, question: str, today: date | None = None) -> dict:
    """Return ``{"suggestion": ...}`` on success or ``{"error": ...}`` otherwise."""

    aggregator = get_suggestion_aggregator()
    try:
        result = aggregator.generate(username, question, today=today)
    except UserNotFound:
        logger.info(
            "Suggestion requested for unknown user %r",
            username,
            extra={"username": username, "outcome": "user_not_found"},
        )
        record_suggestion("user_not_found")
        return {"error": USER_NOT_FOUND_MESSAGE}
    except Exception:
        logger.exception(
            "Error fetching user data or generating suggestion for %r",
            username,
            extra={"username": username, "outcome": "failure"},
        )
        record_suggestion("failure")
        return {"error": GENERIC_FAILURE_MESSAGE}
    logger.info(
        "Stored suggestion %s for %r",
        result.suggestion_id,
        username,
        extra={"username": username, "outcome": "success"},
    )
    record_suggestion("success")
    return result.to_dict(include_id=aggregator.settings.include_id)
