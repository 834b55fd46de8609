"""Simple AI client for calling LLM providers (e.g., OpenAI)."""

from __future__ import annotations

import json
from dataclasses import dataclass

import requests
from flask import current_app


class AIClientError(RuntimeError):
    """Raised when the provider answers without a usable completion."""


@dataclass
class AIClient:
    api_key: str
    api_base: str
    default_model: str

    def chat(
        self,
        messages,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
    ):
        if not self.api_key:
            raise RuntimeError("OPENAI_API_KEY / AI_API_KEY is not configured")

        payload = {
            "model": model or self.default_model,
            "messages": messages,
            "temperature": temperature,
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        app = current_app
        connect_timeout = app.config.get("AI_CONNECT_TIMEOUT_SEC", 15)
        read_timeout = app.config.get("AI_READ_TIMEOUT_SEC", 60)

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        # No retry loop; transport and HTTP errors propagate to the caller.
        response = requests.post(
            f"{self.api_base}/chat/completions",
            headers=headers,
            data=json.dumps(payload),
            timeout=(connect_timeout, read_timeout),
        )
        response.raise_for_status()
        return response.json()

    def complete(
        self,
        prompt: str,
        *,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float = 0.7,
    ) -> str:
        """Send ``prompt`` as a single user message and return the stripped reply."""

        raw = self.chat(
            [{"role": "user", "content": prompt}],
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        try:
            content = raw["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AIClientError(f"Malformed completion payload: {exc!r}") from exc
        if not isinstance(content, str) or not content.strip():
            raise AIClientError("Completion returned empty content")
        return content.strip()


def get_ai_client() -> AIClient:
    app = current_app
    client = app.extensions.get("ai_client")
    if client is None:
        client = AIClient(
            api_key=app.config.get("OPENAI_API_KEY", ""),
            api_base=app.config.get("AI_API_BASE", "https://api.openai.com/v1"),
            default_model=app.config.get("SUGGESTION_MODEL", "gpt-4"),
        )
        app.extensions["ai_client"] = client
    return client
