"""Pydantic models for content analysis requests and results.

Attributes are snake_case in Python; the camelCase alias generator produces
the wire names the dashboard consumes (``quizQuestions``, ``correctAnswer``).
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ContentType(str, Enum):
    YOUTUBE = "youtube"
    NOTES = "notes"
    GENERIC = "generic"

    @classmethod
    def from_tag(cls, tag: Any) -> "ContentType":
        """Map a caller-supplied tag to a template; unknown or non-string tags are generic."""
        if not isinstance(tag, str):
            return cls.GENERIC
        try:
            return cls(tag)
        except ValueError:
            return cls.GENERIC


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Flashcard(_CamelModel):
    """Question on the front, answer on the back."""

    front: str
    back: str


class QuizQuestion(_CamelModel):
    """A single four-option multiple-choice question."""

    question: str
    options: list[str] = Field(default_factory=list)
    correct_answer: int = 0


class FlashcardSet(_CamelModel):
    """Structured output expected from the flashcard prompt."""

    flashcards: list[Flashcard] = Field(default_factory=list)


class QuizQuestionSet(_CamelModel):
    """Structured output expected from the quiz prompt."""

    questions: list[QuizQuestion] = Field(default_factory=list)


class AnalysisRequest(BaseModel):
    """Raw content plus the caller's content-type tag (wire name ``type``)."""

    content: Optional[str] = None
    type: Any = None

    @field_validator("content", mode="before")
    @classmethod
    def _content_as_text(cls, value: Any) -> Optional[str]:
        # scalars and containers are analyzed as their text; falsy scalars count as missing
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else None
        if isinstance(value, (int, float)):
            return str(value) if value else None
        return json.dumps(value)

    @property
    def content_type(self) -> ContentType:
        return ContentType.from_tag(self.type)


class AnalysisResult(_CamelModel):
    summary: str
    flashcards: list[Flashcard] = Field(default_factory=list)
    quiz_questions: list[QuizQuestion] = Field(default_factory=list)
    original_content: str
    content_type: Any = None
