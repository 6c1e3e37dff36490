from __future__ import annotations

import json
from pathlib import Path

import pytest

from regional_risk.core.config import settings


def make_row(name: str, level: str = "MEDIUM", score: float = 50, population: int = 100000, **symptoms) -> dict:
    counts = {"waterborne": 10, "vector_borne": 5, "respiratory": 20, "other": 2}
    counts.update(symptoms)
    return {
        "region_name": name,
        "symptoms": counts,
        "population": population,
        "temperature": 24.5,
        "humidity": 60,
        "water_quality_index": 70,
        "overall_level": level,
        "overall_score": score,
    }


SAMPLE_ROWS = [
    make_row("Souss-Massa", "HIGH", 80, waterborne=50),
    make_row("Fès-Meknès", "MEDIUM", 40, population=200000),
    make_row("Dakhla-Oued Ed-Dahab", "LOW", 20, population=50000),
]


@pytest.fixture
def regions_file(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "regions.json"
    path.write_text(json.dumps(SAMPLE_ROWS), encoding="utf-8")
    monkeypatch.setattr(settings, "DATA_PATH", path)
    return path


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


def gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def fake_post(monkeypatch):
    """Replaces requests.post; set .response (or .exc) then inspect .calls."""

    class _Fake:
        def __init__(self):
            self.calls = []
            self.response = FakeResponse(200, gemini_payload("  Generated text.  "))
            self.exc = None

        def __call__(self, url, **kwargs):
            self.calls.append({"url": url, **kwargs})
            if self.exc is not None:
                raise self.exc
            return self.response

        @property
        def last_prompt(self) -> str:
            return self.calls[-1]["json"]["contents"][0]["parts"][0]["text"]

    fake = _Fake()
    monkeypatch.setattr("regional_risk.services.gemini_client.requests.post", fake)
    return fake
