"""Text generation backends used by the content analysis orchestrator.

Every backend implements ``TextGenerator.generate_text``: it returns the model
text (``""`` when the service answered but produced nothing usable) or raises
``GenerationError`` when the call did not succeed. Provider imports for
pydantic-ai are kept lazy to avoid import-time errors when credentials are
missing.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional, Protocol

import httpx
from pydantic_ai import Agent

from app.core.config import Settings
from app.core.errors import ConfigurationError, GenerationError
from app.core.logging import get_logger

logger = get_logger(__name__)


class TextGenerator(Protocol):
    async def generate_text(self, prompt: str) -> str: ...


def _extract_text(data: Any) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a response body."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


class GeminiRestGenerator:
    """Calls the Gemini ``generateContent`` REST endpoint with httpx."""

    def __init__(
        self,
        api_key: str,
        *,
        url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def generate_text(self, prompt: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        body = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.url, headers=headers, json=body)
        except httpx.TimeoutException as e:
            raise GenerationError(f"Gemini API timed out: {e}") from e
        except httpx.HTTPError as e:
            raise GenerationError(f"HTTP error calling Gemini API: {e}") from e

        if not response.is_success:
            logger.error("Gemini API error: %s", response.text)
            raise GenerationError(
                f"Gemini API returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GenerationError("Gemini API returned a non-JSON body") from e
        return _extract_text(data)


class AgentTextGenerator:
    """Plain-text generation through a pydantic-ai agent."""

    def __init__(self, model: Any, *, timeout: float = 30.0) -> None:
        self.agent: Agent[None, str] = Agent[None, str](model, output_type=str)
        self.timeout = timeout

    async def generate_text(self, prompt: str) -> str:
        from pydantic_ai.exceptions import AgentRunError, UnexpectedModelBehavior

        try:
            res = await asyncio.wait_for(self.agent.run(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise GenerationError("Model call timed out") from e
        except UnexpectedModelBehavior as e:
            logger.warning("Model returned no usable output: %s", e)
            return ""
        except AgentRunError as e:
            raise GenerationError(f"Model call failed: {e}") from e
        return (res.output or "").strip()


def _build_google_model(settings: Settings):
    """Build the Google Gemini model provider (lazy import)."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=settings.gemini.api_key)
    return GoogleModel(settings.gemini.model, provider=provider)


def _build_openrouter_model(settings: Settings):
    """Build OpenRouter model via OpenAI-compatible provider (lazy import)."""
    from pydantic_ai.models.openai import OpenAIChatModel
    from pydantic_ai.providers.openai import OpenAIProvider

    provider = OpenAIProvider(
        api_key=settings.openrouter_api_key,
        base_url="https://openrouter.ai/api/v1",
    )
    return OpenAIChatModel(settings.openrouter_model, provider=provider)


def build_text_generator(settings: Settings) -> TextGenerator:
    """Select the configured backend; raises ``ConfigurationError`` without a credential."""
    provider = (settings.model_provider or "rest").lower()
    timeout = settings.gemini.timeout_seconds

    if provider == "openrouter":
        if not settings.openrouter_api_key:
            raise ConfigurationError("OpenRouter API key not configured")
        return AgentTextGenerator(_build_openrouter_model(settings), timeout=timeout)

    if not settings.gemini.api_key:
        raise ConfigurationError()
    if provider == "google":
        return AgentTextGenerator(_build_google_model(settings), timeout=timeout)
    return GeminiRestGenerator(
        settings.gemini.api_key,
        url=settings.gemini.generate_url,
        timeout=timeout,
    )
