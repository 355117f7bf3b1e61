"""Content analysis module exports."""

from .models import AnalysisRequest, AnalysisResult, ContentType, Flashcard, QuizQuestion
from .generator import TextGenerator, build_text_generator
from .main import ContentAnalysisOrchestrator

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "ContentType",
    "Flashcard",
    "QuizQuestion",
    "TextGenerator",
    "build_text_generator",
    "ContentAnalysisOrchestrator",
]
