"""Schemas for suggestion generation requests."""

from __future__ import annotations

from marshmallow import Schema, fields


class GenerateSuggestionSchema(Schema):
    username = fields.String(required=True)
    question = fields.String(required=True)
