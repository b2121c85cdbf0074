"""Tests for the provider base class lifecycle."""

import asyncio

import pytest
from pydantic import PrivateAttr

from taskpilot.core.errors import ProviderError
from taskpilot.providers.core.base import Provider, ProviderSettings


class CountingProvider(Provider[ProviderSettings]):
    _init_count: int = PrivateAttr(default=0)
    _shutdown_count: int = PrivateAttr(default=0)

    async def _initialize(self) -> None:
        await asyncio.sleep(0)
        self._init_count += 1

    async def _shutdown(self) -> None:
        self._shutdown_count += 1


class FailingProvider(Provider[ProviderSettings]):
    async def _initialize(self) -> None:
        raise RuntimeError("cannot connect")


def _provider(cls):
    return cls(name="test-provider", provider_type="test", settings=ProviderSettings())


class TestProviderSettings:
    def test_defaults(self):
        settings = ProviderSettings()
        assert settings.timeout == 60.0
        assert settings.verbose is False

    def test_with_overrides(self):
        settings = ProviderSettings().with_overrides(timeout=5.0)
        assert settings.timeout == 5.0

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValueError):
            ProviderSettings(unknown=True)


class TestProviderLifecycle:
    @pytest.mark.asyncio
    async def test_initialize_once(self):
        provider = _provider(CountingProvider)
        await asyncio.gather(provider.initialize(), provider.initialize(), provider.initialize())
        assert provider.initialized
        assert provider._init_count == 1

    @pytest.mark.asyncio
    async def test_shutdown(self):
        provider = _provider(CountingProvider)
        await provider.shutdown()
        assert provider._shutdown_count == 0

        await provider.initialize()
        await provider.shutdown()
        assert not provider.initialized
        assert provider._shutdown_count == 1

    @pytest.mark.asyncio
    async def test_initialize_failure_is_wrapped(self):
        provider = _provider(FailingProvider)
        with pytest.raises(ProviderError) as exc_info:
            await provider.initialize()
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert exc_info.value.provider_context.operation == "initialize"
        assert not provider.initialized

    def test_name_required(self):
        with pytest.raises(ValueError):
            CountingProvider(name="", provider_type="test", settings=ProviderSettings())
