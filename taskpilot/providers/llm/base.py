"""LLM provider base class.

An LLM provider performs the single external call of a flow: it receives
a fully rendered instruction plus the JSON schema the answer must follow,
and hands back the decoded JSON payload. Validating that payload against
the flow's output model is the flow's job, not the provider's.
"""

import json
import logging
import re
from typing import Any, Generic, TypeVar

from pydantic import Field, field_validator

from taskpilot.providers.core.base import Provider, ProviderSettings

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class LLMProviderSettings(ProviderSettings):
    """Settings for LLM providers."""

    temperature: float = Field(
        default=0.2,
        description="Sampling temperature for generation (0.0 = deterministic, 2.0 = very random)",
    )
    max_output_tokens: int = Field(default=2048, description="Maximum tokens to generate")
    top_p: float | None = Field(default=None, description="Top-p (nucleus) sampling threshold (0.0-1.0)")

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        """Validate temperature."""
        if v < 0 or v > 2:
            raise ValueError("Temperature must be between 0 and 2")
        return v

    @field_validator("top_p")
    @classmethod
    def validate_top_p(cls, v: float | None) -> float | None:
        """Validate top_p."""
        if v is not None and (v < 0 or v > 1):
            raise ValueError("Top_p must be between 0 and 1")
        return v


SettingsT = TypeVar("SettingsT", bound=LLMProviderSettings)


class LLMProvider(Provider[SettingsT], Generic[SettingsT]):
    """Base class for LLM backends used by flows."""

    async def _initialize(self) -> None:
        """Nothing to set up by default."""

    async def generate_structured(
        self,
        instruction: str,
        response_schema: dict[str, Any],
        model_name: str,
    ) -> Any:
        """Ask the model for a JSON answer constrained by a schema.

        Implementations make exactly one outbound request per call and do
        not retry.

        Args:
            instruction: Fully rendered natural-language instruction
            response_schema: JSON schema of the expected answer
            model_name: Model identifier to call

        Returns:
            The decoded JSON payload, or None when the model returned no text

        Raises:
            ProviderError: If the request fails or is refused
        """
        raise NotImplementedError("Subclasses must implement generate_structured()")

    def decode_payload(self, text: str | None) -> Any:
        """Decode a JSON answer, tolerating a surrounding markdown fence.

        Returns None for missing or blank text. Text that is not valid JSON
        is returned unchanged so the flow reports it as a schema mismatch.
        """
        if text is None or not text.strip():
            return None
        stripped = text.strip()
        fence = _FENCE_PATTERN.match(stripped)
        if fence:
            stripped = fence.group(1)
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            logger.warning(f"Provider '{self.name}' returned non-JSON text ({len(stripped)} chars)")
            return stripped
