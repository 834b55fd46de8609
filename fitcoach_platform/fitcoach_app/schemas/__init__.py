"""Serialization / validation schemas (Marshmallow)."""

from .suggestion_schema import GenerateSuggestionSchema

__all__ = ["GenerateSuggestionSchema"]
