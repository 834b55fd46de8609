"""Suggestion generation endpoint."""

from __future__ import annotations

import logging
from http import HTTPStatus

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from ..schemas import GenerateSuggestionSchema
from ..services import suggestion_service

suggestion_bp = Blueprint("suggestion_bp", __name__)

logger = logging.getLogger(__name__)

generate_schema = GenerateSuggestionSchema()


@suggestion_bp.errorhandler(ValidationError)
def handle_validation_error(err: ValidationError):
    # A missing username answers like an unknown user.
    messages = err.messages if isinstance(err.messages, dict) else {}
    if "username" in messages:
        error = suggestion_service.USER_NOT_FOUND_MESSAGE
    else:
        error = suggestion_service.GENERIC_FAILURE_MESSAGE
    logger.info(
        "Rejected suggestion request: %s",
        err.messages,
        extra={"outcome": "invalid_request"},
    )
    return jsonify({"error": error}), HTTPStatus.INTERNAL_SERVER_ERROR


@suggestion_bp.get("/ping")
def ping():
    return jsonify({"module": "suggestion", "status": "ok"})


@suggestion_bp.post("/generate-suggestion")
def generate_suggestion():
    payload = generate_schema.load(request.get_json(silent=True) or {})
    result = suggestion_service.generate_suggestion(payload["username"], payload["question"])
    if "error" in result:
        return jsonify(result), HTTPStatus.INTERNAL_SERVER_ERROR
    return jsonify(result)
