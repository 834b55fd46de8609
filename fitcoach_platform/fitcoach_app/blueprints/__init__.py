"""HTTP blueprints (suggestions, metrics, health)."""

from __future__ import annotations

from .ops_bp import ops_bp
from .suggestion_bp import suggestion_bp

BLUEPRINTS = (
    (suggestion_bp, ""),
    (ops_bp, ""),
)

__all__ = [
    "BLUEPRINTS",
    "ops_bp",
    "suggestion_bp",
]
