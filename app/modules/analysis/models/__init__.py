from .analysis import (
    AnalysisRequest,
    AnalysisResult,
    ContentType,
    Flashcard,
    FlashcardSet,
    QuizQuestion,
    QuizQuestionSet,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "ContentType",
    "Flashcard",
    "FlashcardSet",
    "QuizQuestion",
    "QuizQuestionSet",
]
