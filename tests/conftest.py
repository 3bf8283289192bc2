"""Shared fixtures: a deterministic model stand-in and an app wired to it."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from audio_analysis.app import create_app
from audio_analysis.dependencies import get_analysis_model
from audio_analysis.domain.models import InlineAudio
from audio_analysis.infrastructure.interfaces import AnalysisModel

WELL_FORMED_ANALYSIS = {
    "identifiedLanguage": "Hindi",
    "nativeSubtitles": "नमस्ते, आप कैसे हैं?",
    "englishTransliteration": "Namaste, aap kaise hain?",
    "nativeSummary": "एक अभिवादन।",
    "englishSummary": "A greeting.",
    "englishTranslation": "Hello, how are you?",
}


class FakeAnalysisModel(AnalysisModel):
    """Returns a fixed string, or raises a fixed error, and records each call."""

    def __init__(self, response_text: str = "", error: Exception | None = None):
        self.response_text = response_text
        self.error = error
        self.calls: list[tuple[str, InlineAudio]] = []

    @property
    def model_name(self) -> str:
        return "fake-model"

    def generate(self, instruction: str, audio: InlineAudio) -> str:
        self.calls.append((instruction, audio))
        if self.error is not None:
            raise self.error
        return self.response_text


@pytest.fixture
def fake_model() -> FakeAnalysisModel:
    return FakeAnalysisModel(json.dumps(WELL_FORMED_ANALYSIS, ensure_ascii=False))


@pytest.fixture
def app(fake_model):
    application = create_app()
    application.dependency_overrides[get_analysis_model] = lambda: fake_model
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
