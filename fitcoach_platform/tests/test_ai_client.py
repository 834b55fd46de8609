"""Tests for the chat-completions client."""

from __future__ import annotations

import json

import pytest
import requests

from fitcoach_app.services import ai_client
from fitcoach_app.services.ai_client import AIClient, AIClientError, get_ai_client


class DummyResponse:
    def __init__(self, payload, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def _completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_complete_posts_prompt_and_limits(app_with_db, monkeypatch):
    captured = {}

    def fake_post(url, headers=None, data=None, timeout=None):
        captured.update({"url": url, "headers": headers, "body": json.loads(data), "timeout": timeout})
        return DummyResponse(_completion("  Drink water.  "))

    monkeypatch.setattr(ai_client.requests, "post", fake_post)
    client = AIClient(api_key="sk-test", api_base="https://llm.example/v1", default_model="gpt-4")

    text = client.complete("Prompt body", max_tokens=100, temperature=0.7)

    assert text == "Drink water."
    assert captured["url"] == "https://llm.example/v1/chat/completions"
    assert captured["headers"]["Authorization"] == "Bearer sk-test"
    assert captured["body"] == {
        "model": "gpt-4",
        "messages": [{"role": "user", "content": "Prompt body"}],
        "temperature": 0.7,
        "max_tokens": 100,
    }
    assert captured["timeout"] == (15, 60)


def test_http_error_is_not_retried(app_with_db, monkeypatch):
    calls = {"count": 0}

    def fake_post(*args, **kwargs):
        calls["count"] += 1
        return DummyResponse({"error": "overloaded"}, status_code=503)

    monkeypatch.setattr(ai_client.requests, "post", fake_post)
    client = AIClient(api_key="sk-test", api_base="https://llm.example/v1", default_model="gpt-4")
    with pytest.raises(requests.HTTPError):
        client.complete("Prompt")
    assert calls["count"] == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"choices": []},
        {"unexpected": True},
        _completion(""),
        _completion(None),
    ],
)
def test_malformed_or_empty_completion_raises(app_with_db, monkeypatch, payload):
    monkeypatch.setattr(ai_client.requests, "post", lambda *a, **k: DummyResponse(payload))
    client = AIClient(api_key="sk-test", api_base="https://llm.example/v1", default_model="gpt-4")
    with pytest.raises(AIClientError):
        client.complete("Prompt")


def test_missing_api_key(app_with_db):
    client = AIClient(api_key="", api_base="https://llm.example/v1", default_model="gpt-4")
    with pytest.raises(RuntimeError):
        client.complete("Prompt")


def test_get_ai_client_is_cached(app_with_db):
    client = get_ai_client()
    assert client.api_key == "test-key"
    assert client.default_model == "gpt-4"
    assert get_ai_client() is client
