"""Prompt templates for the three analysis steps."""

from __future__ import annotations

from app.modules.analysis.models import ContentType


SUMMARY_TEMPLATES: dict[ContentType, str] = {
    ContentType.YOUTUBE: (
        "Analyze this YouTube video URL and provide a comprehensive study summary. "
        "Extract key concepts, main points, and learning objectives: {content}"
    ),
    ContentType.NOTES: (
        "Analyze these study notes and create a comprehensive summary with key "
        "concepts, important points, and main takeaways: {content}"
    ),
    ContentType.GENERIC: (
        "Analyze this study material and provide a comprehensive summary with key "
        "concepts, important points, and main takeaways: {content}"
    ),
}

FLASHCARDS_TEMPLATE = (
    "Based on this content, create 5-7 educational flashcards in JSON format. "
    'Each flashcard should have a "front" (question) and "back" (answer). '
    'Format as: {{"flashcards": [{{"front": "question", "back": "answer"}}]}}. '
    "Content: {summary}"
)

QUIZ_TEMPLATE = (
    "Based on this content, create 3-5 multiple choice quiz questions in JSON format. "
    'Each question should have a "question", "options" array with 4 choices, '
    'and "correctAnswer" (0-3 index). '
    'Format as: {{"questions": [{{"question": "...", "options": ["A", "B", "C", "D"], '
    '"correctAnswer": 0}}]}}. '
    "Content: {summary}"
)


def build_summary_prompt(content: str, content_type: ContentType) -> str:
    return SUMMARY_TEMPLATES[content_type].format(content=content)


def build_flashcards_prompt(summary: str) -> str:
    return FLASHCARDS_TEMPLATE.format(summary=summary)


def build_quiz_prompt(summary: str) -> str:
    return QUIZ_TEMPLATE.format(summary=summary)
