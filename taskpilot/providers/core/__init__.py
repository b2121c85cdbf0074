from .base import Provider, ProviderSettings
from .decorators import llm_provider, provider
from .registry import ProviderRegistry, provider_registry

__all__ = [
    "Provider",
    "ProviderSettings",
    "ProviderRegistry",
    "provider_registry",
    "provider",
    "llm_provider",
]
