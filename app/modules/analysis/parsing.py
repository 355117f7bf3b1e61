"""Best-effort parsing of model free text into flashcards and quiz questions.

Model output is not guaranteed to be well-formed. Both entry points return a
(possibly empty) list and never raise.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

from pydantic import ValidationError

from app.core.logging import get_logger
from app.modules.analysis.models import (
    Flashcard,
    FlashcardSet,
    QuizQuestion,
    QuizQuestionSet,
)

logger = get_logger(__name__)

QUIZ_OPTION_COUNT = 4

_FENCE_RE = re.compile(r"^```[a-zA-Z0-9_-]*\s*\n?(.*?)\n?```$", re.DOTALL)


def _strip_fences(text: str) -> str:
    s = text.strip()
    m = _FENCE_RE.match(s)
    if m:
        return m.group(1).strip()
    return s


def _load_object(text: Optional[str]) -> Optional[dict[str, Any]]:
    if not text:
        return None
    try:
        data = json.loads(_strip_fences(text))
    except ValueError as e:
        logger.warning("Model output is not valid JSON: %s", e)
        return None
    if not isinstance(data, dict):
        logger.warning("Model output is JSON but not an object: %s", type(data).__name__)
        return None
    return data


def parse_flashcards(text: Optional[str]) -> list[Flashcard]:
    """Parse ``{"flashcards": [{"front", "back"}]}``; empty list on any failure."""
    data = _load_object(text)
    if data is None:
        return []
    try:
        parsed = FlashcardSet.model_validate(
            {"flashcards": data.get("flashcards") or []}
        )
    except ValidationError as e:
        logger.warning("Failed to parse flashcards: %d validation errors", e.error_count())
        return []
    return parsed.flashcards


def _normalize_question(q: QuizQuestion) -> Optional[QuizQuestion]:
    """Pad or trim to four options; None if the correct option does not survive."""
    if not q.question.strip():
        return None

    options: list[str] = []
    idx: Optional[int] = None
    for old_idx, raw in enumerate(q.options):
        s = str(raw).strip()
        if not s:
            continue
        if old_idx == q.correct_answer:
            idx = len(options)
        options.append(s)

    if idx is None or idx >= QUIZ_OPTION_COUNT:
        return None
    options = options[:QUIZ_OPTION_COUNT]
    while len(options) < QUIZ_OPTION_COUNT:
        options.append(f"Option {len(options) + 1}")
    return QuizQuestion(question=q.question.strip(), options=options, correct_answer=idx)


def parse_quiz_questions(text: Optional[str]) -> list[QuizQuestion]:
    """Parse ``{"questions": [...]}``; empty list on any failure."""
    data = _load_object(text)
    if data is None:
        return []
    try:
        parsed = QuizQuestionSet.model_validate(
            {"questions": data.get("questions") or []}
        )
    except ValidationError as e:
        logger.warning("Failed to parse quiz questions: %d validation errors", e.error_count())
        return []
    out: list[QuizQuestion] = []
    for q in parsed.questions:
        normalized = _normalize_question(q)
        if normalized is not None:
            out.append(normalized)
    return out
