from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from app.core.config import settings
from app.modules.analysis.main import ContentAnalysisOrchestrator
from app.modules.analysis.models import AnalysisRequest, AnalysisResult
from .schemas import ErrorResponse


router = APIRouter()


def get_orchestrator() -> ContentAnalysisOrchestrator:
    return ContentAnalysisOrchestrator()


Orchestrator = Annotated[ContentAnalysisOrchestrator, Depends(get_orchestrator)]


@router.post(
    f"/{settings.app.version}/analyze-content",
    response_model=AnalysisResult,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    tags=["analysis"],
)
async def analyze_content(
    orchestrator: Orchestrator,
    payload: Any = Body(default=None),
) -> AnalysisResult:
    """Summarize the content and derive flashcards and quiz questions from it.

    Any JSON body is accepted; a body that is not an object has no content.
    """
    req = AnalysisRequest.model_validate(payload if isinstance(payload, dict) else {})
    return await orchestrator.analyze(req)
