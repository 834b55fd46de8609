"""Business logic modules (AI client, fitness store, suggestion pipeline)."""

from . import (
    ai_client,
    fitness_store,
    suggestion_prompts,
    suggestion_service,
)

__all__ = [
    "ai_client",
    "fitness_store",
    "suggestion_prompts",
    "suggestion_service",
]
