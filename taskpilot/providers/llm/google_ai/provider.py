"""GoogleAI (Gemini) provider implementation.

This module implements the LLM provider used in production, backed by
Google's Gemini models through the google-genai library.
"""

import logging
from typing import Any

from google import genai
from google.genai import types
from pydantic import Field, PrivateAttr

from taskpilot.core.errors.errors import ErrorContext, ProviderError
from taskpilot.core.errors.models import ProviderErrorContext
from taskpilot.providers.core.decorators import provider
from taskpilot.providers.llm.base import LLMProvider, LLMProviderSettings

logger = logging.getLogger(__name__)


class GoogleAISettings(LLMProviderSettings):
    """Settings for the GoogleAI (Gemini) provider.

    Google AI is a cloud API; only an API key is required. No host or
    port is involved.
    """

    api_key: str = Field(default="", description="Google AI API key (get one from Google AI Studio)")
    api_base: str | None = Field(default=None, description="Custom API base URL (optional)")


@provider(provider_type="llm", name="googleai", settings_class=GoogleAISettings)
class GoogleAIProvider(LLMProvider[GoogleAISettings]):
    """Provider for Google AI (Gemini) models using JSON-mode structured output."""

    _client: Any = PrivateAttr(default=None)

    async def _initialize(self) -> None:
        """Create the google-genai client from the configured API key."""
        if not self.settings.api_key:
            raise self._error(
                "Google AI API key not configured.",
                error_type="ConfigurationError",
                operation="api_key_check",
            )
        http_options = types.HttpOptions(
            timeout=int(self.settings.timeout * 1000),
            base_url=self.settings.api_base,
        )
        self._client = genai.Client(api_key=self.settings.api_key, http_options=http_options)
        logger.info("GoogleAIProvider initialized with client.")

    async def _shutdown(self) -> None:
        self._client = None

    def _create_generation_config(self, response_schema: dict[str, Any]) -> types.GenerateContentConfig:
        """Create the JSON-mode generation config for one request."""
        return types.GenerateContentConfig(
            temperature=self.settings.temperature,
            max_output_tokens=self.settings.max_output_tokens,
            top_p=self.settings.top_p,
            response_mime_type="application/json",
            response_schema=response_schema,
        )

    async def generate_structured(
        self,
        instruction: str,
        response_schema: dict[str, Any],
        model_name: str,
    ) -> Any:
        if not self._initialized:
            await self.initialize()

        generation_config = self._create_generation_config(response_schema)
        logger.info(f"Generating structured output with Gemini model '{model_name}'")
        logger.debug(f"Prompt: {instruction[:200]}...")

        try:
            response = await self._client.aio.models.generate_content(
                model=model_name,
                contents=instruction,
                config=generation_config,
            )
        except Exception as e:
            logger.error(f"Google AI request failed for model '{model_name}': {e}")
            raise self._error(
                f"Google AI structured generation failed: {str(e)}",
                error_type="StructuredGenerationError",
                operation=f"structured_generation_with_{model_name}",
                cause=e,
            ) from e

        feedback = response.prompt_feedback
        if feedback is not None and feedback.block_reason:
            logger.warning(f"Prompt blocked for model '{model_name}'. Reason: {feedback.block_reason_message}")
            raise self._error(
                f"Prompt blocked by Google AI safety filters: {feedback.block_reason_message}",
                error_type="BlockedPromptError",
                operation="safety_check",
            )

        if not response.candidates or not response.candidates[0].content or not response.candidates[0].content.parts:
            logger.warning(f"No content generated by model '{model_name}'")
            return None

        return self.decode_payload(response.text)

    def _error(
        self, message: str, error_type: str, operation: str, cause: Exception | None = None
    ) -> ProviderError:
        return ProviderError(
            message=message,
            context=ErrorContext.create(
                flow_name="GoogleAIProvider",
                error_type=error_type,
                error_location="generate_structured",
                component=self.name,
                operation=operation,
            ),
            provider_context=ProviderErrorContext(
                provider_name=self.name,
                provider_type=self.provider_type,
                operation=operation,
            ),
            cause=cause,
        )
