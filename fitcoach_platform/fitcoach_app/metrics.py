"""Prometheus metrics helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

REQUEST_COUNT = Counter(
    "fitcoach_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "fitcoach_request_latency_seconds",
    "Latency of HTTP requests in seconds",
    ["endpoint"],
)
SUGGESTION_OUTCOMES = Counter(
    "fitcoach_suggestions_total",
    "Suggestion generation attempts by outcome",
    ["outcome"],
)
MODEL_LATENCY = Histogram(
    "fitcoach_suggestion_model_latency_seconds",
    "Latency of suggestion-model calls in seconds",
    ["model"],
)


def record_request(method: str, endpoint: str, status: int, latency: float) -> None:
    REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status).inc()
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(latency)


def record_suggestion(outcome: str) -> None:
    SUGGESTION_OUTCOMES.labels(outcome=outcome).inc()


def record_model_call(model: str, latency: float) -> None:
    MODEL_LATENCY.labels(model=model).observe(latency)


def latest_metrics() -> tuple[bytes, str]:
    data = generate_latest()
    return data, CONTENT_TYPE_LATEST
