"""Construction of flow contexts from settings."""

import logging

from taskpilot.core.context.context import FlowContext
from taskpilot.core.settings.settings import TaskpilotSettings
from taskpilot.providers.core.registry import provider_registry
from taskpilot.providers.llm.base import LLMProvider

logger = logging.getLogger(__name__)


def create_flow_context(settings: TaskpilotSettings, user_id: str | None = None) -> FlowContext:
    """Build a FlowContext whose provider is created from ``settings``.

    Raises:
        ConfigurationError: If the configured provider is unknown or its settings are invalid
        TypeError: If the configured provider is not an LLM provider
    """
    llm = provider_registry.create(settings.llm_provider, settings.provider_settings())
    if not isinstance(llm, LLMProvider):
        raise TypeError(f"Provider '{settings.llm_provider}' is not an LLM provider")
    logger.debug(f"Created flow context with provider '{llm.name}' and model '{settings.model_name}'")
    return FlowContext(llm, settings.model_name, user_id=user_id)
