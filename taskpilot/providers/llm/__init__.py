"""LLM provider implementations with structured (JSON) generation."""

from .base import LLMProvider, LLMProviderSettings
from .google_ai.provider import GoogleAIProvider, GoogleAISettings

__all__ = [
    "LLMProvider",
    "LLMProviderSettings",
    "GoogleAIProvider",
    "GoogleAISettings",
]
