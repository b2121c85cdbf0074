"""Provider factory registry.

Providers register a factory through the @provider decorator; callers
build fresh instances from a settings dictionary with create().
"""

import logging
from collections.abc import Callable
from typing import Any

from taskpilot.core.errors.errors import ConfigurationError, ErrorContext
from taskpilot.core.errors.models import ConfigurationErrorContext
from taskpilot.core.registry.registry import BaseRegistry

from .base import Provider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[dict[str, Any] | None], Provider]


class ProviderRegistry(BaseRegistry[ProviderFactory]):
    """Registry of provider factories keyed by provider name."""

    def __init__(self) -> None:
        self._factories: dict[str, ProviderFactory] = {}
        self._metadata: dict[str, dict[str, Any]] = {}

    def register(self, name: str, obj: ProviderFactory, **metadata: Any) -> None:
        """Register a provider factory.

        Raises:
            ValueError: If a factory with the same name already exists
        """
        if name in self._factories:
            raise ValueError(f"Provider factory '{name}' already registered")
        self._factories[name] = obj
        self._metadata[name] = metadata
        logger.debug(f"Registered provider factory '{name}' ({metadata.get('provider_type', 'unknown')})")

    def register_factory(
        self, name: str, factory: ProviderFactory, provider_type: str, settings_class: type, **metadata: Any
    ) -> None:
        """Register a factory together with its provider type and settings class."""
        self.register(name, factory, provider_type=provider_type, settings_class=settings_class, **metadata)

    def get(self, name: str, expected_type: type | None = None) -> ProviderFactory:
        if name not in self._factories:
            raise KeyError(f"Provider '{name}' not found")
        return self._factories[name]

    def get_metadata(self, name: str) -> dict[str, Any]:
        if name not in self._metadata:
            raise KeyError(f"Provider '{name}' not found")
        return self._metadata[name]

    def contains(self, name: str) -> bool:
        return name in self._factories

    def list(self, filter_criteria: dict[str, Any] | None = None) -> list[str]:
        """List provider names, optionally filtered by provider_type."""
        provider_type = (filter_criteria or {}).get("provider_type")
        return [
            name
            for name, metadata in self._metadata.items()
            if provider_type is None or metadata.get("provider_type") == provider_type
        ]

    def clear(self) -> None:
        self._factories.clear()
        self._metadata.clear()

    def create(self, name: str, settings: dict[str, Any] | None = None) -> Provider:
        """Build a new provider instance from its registered factory.

        Args:
            name: Registered provider name (e.g. "googleai")
            settings: Optional settings dictionary validated by the provider's settings class

        Raises:
            ConfigurationError: If the provider is unknown or its settings are invalid
        """
        if name not in self._factories:
            raise ConfigurationError(
                message=f"Unknown provider '{name}'. Available: {sorted(self._factories)}",
                context=ErrorContext.create(
                    flow_name="provider_registry",
                    error_type="ConfigurationError",
                    error_location="create",
                    component="ProviderRegistry",
                    operation="create_provider",
                ),
                config_context=ConfigurationErrorContext(
                    config_key="llm_provider",
                    config_section="providers",
                    expected_type=" | ".join(sorted(self._factories)) or "<none registered>",
                    actual_value=name,
                ),
            )
        try:
            return self._factories[name](settings)
        except ValueError as e:
            raise ConfigurationError(
                message=f"Invalid settings for provider '{name}': {e}",
                context=ErrorContext.create(
                    flow_name="provider_registry",
                    error_type="ConfigurationError",
                    error_location="create",
                    component="ProviderRegistry",
                    operation="create_provider",
                ),
                config_context=ConfigurationErrorContext(
                    config_key=name,
                    config_section="providers",
                    expected_type=self._metadata[name]["settings_class"].__name__,
                    actual_value=str(sorted((settings or {}).keys())),
                ),
                cause=e,
            ) from e


provider_registry = ProviderRegistry()
