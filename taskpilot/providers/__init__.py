"""Providers for external services.

Importing this package registers the built-in provider factories.
"""

from .core import Provider, ProviderSettings, provider, provider_registry
from .llm import GoogleAIProvider, GoogleAISettings, LLMProvider, LLMProviderSettings

__all__ = [
    "Provider",
    "ProviderSettings",
    "provider",
    "provider_registry",
    "LLMProvider",
    "LLMProviderSettings",
    "GoogleAIProvider",
    "GoogleAISettings",
]
