"""Tests for the provider factory registry and @provider decorator."""

import pytest

from taskpilot.core.errors import ConfigurationError
from taskpilot.providers.core.base import Provider, ProviderSettings
from taskpilot.providers.core.decorators import provider
from taskpilot.providers.core.registry import ProviderRegistry, provider_registry
from taskpilot.providers.llm.google_ai.provider import GoogleAIProvider, GoogleAISettings


class DummySettings(ProviderSettings):
    endpoint: str = "memory"


class DummyProvider(Provider[DummySettings]):
    async def _initialize(self) -> None:
        pass


class TestProviderRegistry:
    @pytest.fixture
    def registry(self):
        registry = ProviderRegistry()

        def factory(settings=None):
            return DummyProvider(name="dummy", provider_type="test", settings=DummySettings(**(settings or {})))

        registry.register_factory("dummy", factory, provider_type="test", settings_class=DummySettings)
        return registry

    def test_register_and_get(self, registry):
        assert registry.contains("dummy")
        assert registry.get_metadata("dummy")["provider_type"] == "test"
        assert registry.list() == ["dummy"]
        assert registry.list({"provider_type": "llm"}) == []

    def test_duplicate_registration(self, registry):
        with pytest.raises(ValueError):
            registry.register("dummy", lambda settings=None: None)

    def test_get_unknown(self, registry):
        with pytest.raises(KeyError):
            registry.get("missing")

    def test_create(self, registry):
        instance = registry.create("dummy", {"endpoint": "elsewhere"})
        assert isinstance(instance, DummyProvider)
        assert instance.settings.endpoint == "elsewhere"

    def test_create_unknown(self, registry):
        with pytest.raises(ConfigurationError) as exc_info:
            registry.create("missing")
        assert exc_info.value.config_context.actual_value == "missing"

    def test_clear(self, registry):
        registry.clear()
        assert registry.list() == []


class TestProviderDecorator:
    def test_googleai_is_registered(self):
        assert provider_registry.contains("googleai")
        assert "googleai" in provider_registry.list({"provider_type": "llm"})
        assert provider_registry.get_metadata("googleai")["settings_class"] is GoogleAISettings

    def test_create_googleai(self):
        instance = provider_registry.create("googleai", {"api_key": "key", "temperature": 0.4})
        assert isinstance(instance, GoogleAIProvider)
        assert instance.name == "googleai"
        assert instance.settings.temperature == 0.4
        assert not instance.initialized

    def test_create_googleai_invalid_settings(self):
        with pytest.raises(ConfigurationError):
            provider_registry.create("googleai", {"temperature": 9.0})
        with pytest.raises(ConfigurationError):
            provider_registry.create("googleai", {"not_a_setting": 1})

    def test_requires_settings_class(self):
        with pytest.raises(TypeError):
            provider("no-settings")

    def test_rejects_non_provider(self):
        with pytest.raises(TypeError):

            @provider("not-a-provider", settings_class=DummySettings)
            class NotAProvider:
                pass
