"""
Shared test fixtures.

Every test stubs the text generator; nothing here reaches the network.
"""

import json
from typing import Any, Optional, Union

import pytest
from fastapi.testclient import TestClient

from app.apis.analysis.main import get_orchestrator
from app.core.config import GeminiSettings, Settings
from app.core.errors import GenerationError
from app.modules.analysis.main import ContentAnalysisOrchestrator
from main import create_app


Reply = Union[str, Exception]


class StubGenerator:
    """Answers each analysis step from a fixed reply, keyed by prompt kind."""

    def __init__(
        self,
        summary: Reply = "A summary",
        flashcards: Reply = "{}",
        quiz: Reply = "{}",
    ) -> None:
        self.replies = {"summary": summary, "flashcards": flashcards, "quiz": quiz}
        self.prompts: list[str] = []

    @staticmethod
    def kind(prompt: str) -> str:
        if prompt.startswith("Based on this content, create 5-7 educational flashcards"):
            return "flashcards"
        if prompt.startswith("Based on this content, create 3-5 multiple choice quiz"):
            return "quiz"
        return "summary"

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self.replies[self.kind(prompt)]
        if isinstance(reply, Exception):
            raise reply
        return reply


def flashcards_json(n: int) -> str:
    return json.dumps(
        {"flashcards": [{"front": f"Q{i}", "back": f"A{i}"} for i in range(n)]}
    )


def quiz_json(n: int) -> str:
    return json.dumps(
        {
            "questions": [
                {
                    "question": f"Question {i}?",
                    "options": ["A", "B", "C", "D"],
                    "correctAnswer": i % 4,
                }
                for i in range(n)
            ]
        }
    )


def make_settings(api_key: Optional[str] = "test-key", **overrides: Any) -> Settings:
    """Settings built without .env influence."""
    overrides.setdefault("MODEL_PROVIDER", "rest")
    overrides.setdefault("ANALYSIS_PARALLEL", False)
    return Settings(
        _env_file=None,
        gemini=GeminiSettings(_env_file=None, GEMINI_API_KEY=api_key),
        **overrides,
    )


@pytest.fixture
def test_settings() -> Settings:
    return make_settings()


@pytest.fixture
def upstream_error() -> GenerationError:
    return GenerationError("Gemini API returned 503", status_code=503)


@pytest.fixture
def make_client(test_settings):
    """Build a TestClient whose orchestrator uses the given generator."""

    def _make(
        generator: Optional[Any] = None,
        *,
        settings: Optional[Settings] = None,
        orchestrator: Optional[ContentAnalysisOrchestrator] = None,
    ) -> TestClient:
        app = create_app()
        orch = orchestrator or ContentAnalysisOrchestrator(
            generator, settings=settings or test_settings
        )
        app.dependency_overrides[get_orchestrator] = lambda: orch
        return TestClient(app, raise_server_exceptions=False)

    return _make
