from __future__ import annotations

import pytest
import requests

from regional_risk.core.config import settings
from regional_risk.services.gemini_client import (
    DEFAULT_TEXT,
    GenerationError,
    call_gemini,
    request_generation,
)

from conftest import FakeResponse, gemini_payload


def test_missing_key_returns_unavailable_without_network(no_api_key, fake_post) -> None:
    assert call_gemini("hello") == DEFAULT_TEXT[GenerationError.NOT_CONFIGURED]
    assert "GEMINI_API_KEY" in call_gemini("hello")
    assert fake_post.calls == []


def test_success_returns_trimmed_text(api_key, fake_post) -> None:
    assert call_gemini("hello") == "Generated text."


def test_request_shape(api_key, fake_post) -> None:
    call_gemini("the prompt")
    call = fake_post.calls[0]
    assert call["url"] == settings.gemini_url
    assert call["url"].endswith(":generateContent")
    assert call["params"] == {"key": "test-key"}
    assert call["json"]["contents"] == [{"parts": [{"text": "the prompt"}]}]
    assert call["json"]["generationConfig"] == {"temperature": 0.7, "maxOutputTokens": 300}
    assert call["timeout"] == settings.REQUEST_TIMEOUT


def test_rate_limit_message(api_key, fake_post) -> None:
    fake_post.response = FakeResponse(429, text="quota exceeded")
    result = request_generation("hello")
    assert result.error is GenerationError.RATE_LIMITED
    assert result.render().startswith("API rate limit or quota exceeded.")


@pytest.mark.parametrize("status", [400, 403, 500, 503])
def test_other_error_status_is_temporarily_unavailable(api_key, fake_post, status: int) -> None:
    fake_post.response = FakeResponse(status, text="boom")
    assert call_gemini("hello") == "AI explanation temporarily unavailable. Please try again in a moment."


def test_network_error_is_absorbed(api_key, fake_post) -> None:
    fake_post.exc = requests.ConnectionError("down")
    assert request_generation("hello").error is GenerationError.UPSTREAM_ERROR


def test_timeout_is_absorbed(api_key, fake_post) -> None:
    fake_post.exc = requests.Timeout("slow")
    assert call_gemini("hello") == DEFAULT_TEXT[GenerationError.UPSTREAM_ERROR]


def test_unparseable_body_is_absorbed(api_key, fake_post) -> None:
    fake_post.response = FakeResponse(200, text="<html>not json</html>")
    assert request_generation("hello").error is GenerationError.UPSTREAM_ERROR


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
        gemini_payload("   "),
    ],
)
def test_missing_text_is_no_response(api_key, fake_post, payload) -> None:
    fake_post.response = FakeResponse(200, payload)
    assert call_gemini("hello") == "No response generated."


def test_result_ok_flag(api_key, fake_post) -> None:
    result = request_generation("hello")
    assert result.ok
    assert result.text == "Generated text."
