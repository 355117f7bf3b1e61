"""Error types surfaced by the analysis service.

Each error carries the HTTP status and the public message the API returns as
``{"error": message}``. ``GenerationError`` is internal to the text generator
layer; the orchestrator decides whether it becomes ``UpstreamFailure`` or is
absorbed.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for errors reported to the caller."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidInput(AnalysisError):
    status_code = 400
    message = "Content is required"


class ConfigurationError(AnalysisError):
    status_code = 500
    message = "Gemini API key not configured"


class UpstreamFailure(AnalysisError):
    status_code = 500
    message = "Failed to analyze content with Gemini AI"


class InternalError(AnalysisError):
    status_code = 500
    message = "Internal server error"


class GenerationError(Exception):
    """Raised by a text generator when the upstream call did not succeed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
