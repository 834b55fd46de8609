"""Operational endpoints: Prometheus scraping and a database health check."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, current_app, jsonify

from ..metrics import latest_metrics

ops_bp = Blueprint("ops_bp", __name__)


@ops_bp.get("/metrics")
def metrics():
    payload, content_type = latest_metrics()
    return Response(payload, mimetype=content_type)


@ops_bp.get("/healthz")
def healthz():
    from .. import check_database_connection

    app = current_app._get_current_object()
    if check_database_connection(app):
        return jsonify({"status": "ok", "database": "up"})
    return jsonify({"status": "degraded", "database": "down"}), HTTPStatus.SERVICE_UNAVAILABLE
