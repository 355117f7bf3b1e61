"""Content analysis orchestrator.

Drives three dependent calls to a text generator: a mandatory summary, then
best-effort flashcards and quiz questions built from that summary. Only the
summary step can fail the request; the other two degrade to empty lists.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional
from uuid import uuid4

from app.core.config import Settings, settings as default_settings
from app.core.errors import (
    AnalysisError,
    GenerationError,
    InternalError,
    InvalidInput,
    UpstreamFailure,
)
from app.core.logging import get_logger
from app.modules.analysis.generator import TextGenerator, build_text_generator
from app.modules.analysis.models import (
    AnalysisRequest,
    AnalysisResult,
    Flashcard,
    QuizQuestion,
)
from app.modules.analysis.parsing import parse_flashcards, parse_quiz_questions
from app.modules.analysis.prompts import (
    build_flashcards_prompt,
    build_quiz_prompt,
    build_summary_prompt,
)

logger = get_logger(__name__)

NO_SUMMARY_PLACEHOLDER = "No summary generated"


class ContentAnalysisOrchestrator:
    """Produces an ``AnalysisResult`` from raw study content."""

    def __init__(
        self,
        generator: Optional[TextGenerator] = None,
        *,
        settings: Optional[Settings] = None,
        parallel: Optional[bool] = None,
        generator_factory: Callable[[Settings], TextGenerator] = build_text_generator,
    ) -> None:
        self.settings = settings or default_settings
        self.parallel = self.settings.analysis_parallel if parallel is None else parallel
        self._generator = generator
        self._generator_factory = generator_factory

    def _resolve_generator(self) -> TextGenerator:
        if self._generator is not None:
            return self._generator
        return self._generator_factory(self.settings)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Run summary, flashcard and quiz generation for one request."""
        if not request.content:
            raise InvalidInput()

        request_id = uuid4().hex[:8]
        log = {"request_id": request_id}
        try:
            generator = self._resolve_generator()
            return await self._run(generator, request, log)
        except AnalysisError:
            raise
        except Exception as e:
            logger.exception("Error in analyze-content", extra=log)
            raise InternalError() from e

    async def _run(
        self, generator: TextGenerator, request: AnalysisRequest, log: dict
    ) -> AnalysisResult:
        content = request.content or ""
        logger.info(
            "Analyzing %d chars as %s", len(content), request.content_type.value, extra=log
        )

        try:
            summary = await generator.generate_text(
                build_summary_prompt(content, request.content_type)
            )
        except GenerationError as e:
            logger.error("Summary generation failed: %s", e, extra=log)
            raise UpstreamFailure() from e
        summary = summary or NO_SUMMARY_PLACEHOLDER

        if self.parallel:
            flashcards, quiz_questions = await asyncio.gather(
                self._flashcards(generator, summary, log),
                self._quiz_questions(generator, summary, log),
            )
        else:
            flashcards = await self._flashcards(generator, summary, log)
            quiz_questions = await self._quiz_questions(generator, summary, log)

        logger.info(
            "Generated %d flashcards and %d quiz questions",
            len(flashcards),
            len(quiz_questions),
            extra=log,
        )
        return AnalysisResult(
            summary=summary,
            flashcards=flashcards,
            quiz_questions=quiz_questions,
            original_content=content,
            content_type=request.type,
        )

    async def _flashcards(
        self, generator: TextGenerator, summary: str, log: dict
    ) -> list[Flashcard]:
        try:
            text = await generator.generate_text(build_flashcards_prompt(summary))
        except GenerationError as e:
            logger.warning("Flashcard generation failed: %s", e, extra=log)
            return []
        return parse_flashcards(text)

    async def _quiz_questions(
        self, generator: TextGenerator, summary: str, log: dict
    ) -> list[QuizQuestion]:
        try:
            text = await generator.generate_text(build_quiz_prompt(summary))
        except GenerationError as e:
            logger.warning("Quiz generation failed: %s", e, extra=log)
            return []
        return parse_quiz_questions(text)

    def analyze_sync(self, request: AnalysisRequest) -> AnalysisResult:
        return asyncio.run(self.analyze(request))
