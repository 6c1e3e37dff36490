# regional_risk/services/gemini_client.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests

from regional_risk.core.config import settings

log = logging.getLogger(__name__)


class GenerationError(str, Enum):
    NOT_CONFIGURED = "not_configured"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_ERROR = "upstream_error"
    EMPTY_RESPONSE = "empty_response"


# Text shown in place of a narrative, per failure kind
DEFAULT_TEXT = {
    GenerationError.NOT_CONFIGURED: (
        "AI explanation unavailable. Please configure the GEMINI_API_KEY environment variable."
    ),
    GenerationError.RATE_LIMITED: (
        "API rate limit or quota exceeded. Please try again in a minute, or check your Gemini API "
        "quota at https://ai.google.dev/gemini-api/docs/rate-limits"
    ),
    GenerationError.UPSTREAM_ERROR: "AI explanation temporarily unavailable. Please try again in a moment.",
    GenerationError.EMPTY_RESPONSE: "No response generated.",
}


@dataclass(frozen=True)
class GenerationResult:
    text: Optional[str] = None
    error: Optional[GenerationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.error is not None:
            return DEFAULT_TEXT[self.error]
        return self.text


def _extract_text(data) -> Optional[str]:
    """candidates[0].content.parts[0].text, or None if any step is missing."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str):
        return None
    return text.strip() or None


def request_generation(prompt: str) -> GenerationResult:
    """
    Single POST to Gemini generateContent.
    Never raises: every failure comes back as a GenerationResult error.
    """
    api_key = settings.GEMINI_API_KEY
    if not api_key:
        return GenerationResult(error=GenerationError.NOT_CONFIGURED)

    body = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": settings.TEMPERATURE,
            "maxOutputTokens": settings.MAX_OUTPUT_TOKENS,
        },
    }
    try:
        r = requests.post(
            settings.gemini_url,
            params={"key": api_key},
            json=body,
            timeout=settings.REQUEST_TIMEOUT,
        )
        if not r.ok:
            log.error(f"Gemini API error: {r.status_code} {r.text[:500]}")
            if r.status_code == 429:
                return GenerationResult(error=GenerationError.RATE_LIMITED)
            return GenerationResult(error=GenerationError.UPSTREAM_ERROR)
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        log.error(f"Gemini service error: {type(e).__name__}: {e}")
        return GenerationResult(error=GenerationError.UPSTREAM_ERROR)

    text = _extract_text(data)
    if text is None:
        log.warning("Gemini response carried no text")
        return GenerationResult(error=GenerationError.EMPTY_RESPONSE)
    return GenerationResult(text=text)


def call_gemini(prompt: str) -> str:
    """Generated text, or the default text for whatever went wrong."""
    return request_generation(prompt).render()
